import pytest

from hl7stamp.date import Date, parse_date
from hl7stamp.errors import ParsingFailedError, UnexpectedCharacterError


def test_can_parse_date():
    d = parse_date("20230312", False)
    assert d.year == 2023
    assert d.month == 3
    assert d.day == 12


def test_year_only():
    assert parse_date("2023", False) == Date(year=2023)


def test_short_year_fails():
    with pytest.raises(ParsingFailedError) as info:
        parse_date("23", False)
    assert info.value.component == "year"


def test_non_digit_year_fails():
    with pytest.raises(ParsingFailedError):
        parse_date("abcd", False)


def test_trailing_characters_strict():
    with pytest.raises(UnexpectedCharacterError) as info:
        parse_date("2023031", False)
    assert info.value.position == 6
    assert info.value.character == "1"


def test_trailing_characters_lenient():
    assert parse_date("2023031", True) == Date(year=2023, month=3)


@pytest.mark.parametrize("text", ["2023", "202303", "20230312"])
def test_roundtrip(text):
    assert str(parse_date(text, False)) == text


def test_day_hidden_without_month():
    assert str(Date(year=2023, day=12)) == "2023"


def test_parse_classmethods_agree():
    assert Date.parse_strict("20230312") == parse_date("20230312", False)
    assert Date.parse("20230312T", True) == parse_date("20230312", False)
    with pytest.raises(UnexpectedCharacterError):
        Date.parse_strict("20230312T")


def test_year_is_zero_padded():
    assert str(Date(year=5)) == "0005"