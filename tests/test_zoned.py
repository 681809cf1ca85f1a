import datetime as dt

import pytest

from hl7stamp.date import Date
from hl7stamp.errors import (
    ErroredDateTimeComponent as C,
    InvalidComponentRangeError,
    MissingComponentError,
)
from hl7stamp.timeofday import Time
from hl7stamp.timestamp import TimeStamp, TimeStampOffset
from hl7stamp.zoned import (
    civil_date,
    civil_datetime,
    civil_time,
    timestamp_from_civil,
    timestamp_from_zoned,
    zoned_datetime,
)

NOON = dt.datetime(2021, 1, 1, 12, 0, 0, 0)
NOON_TS = TimeStamp(year=2021, month=1, day=1, hour=12, minute=0, second=0, microsecond=0)


def test_can_roundtrip_date():
    ts = timestamp_from_civil(NOON.date())
    assert ts == TimeStamp(year=2021, month=1, day=1)
    assert civil_date(ts) == NOON.date()


def test_can_roundtrip_time():
    assert civil_time(Time(hour=12, minute=0, second=0, microsecond=0)) == NOON.time()


def test_can_roundtrip_timestamp():
    ts = timestamp_from_civil(NOON)
    assert ts == NOON_TS
    assert civil_datetime(ts) == NOON


def test_can_convert_timestamp_to_zoned():
    zoned = zoned_datetime(NOON_TS)
    assert zoned.replace(tzinfo=None) == NOON
    assert zoned.utcoffset() == dt.timedelta(0)


def test_can_convert_zoned_to_timestamp():
    ts = timestamp_from_zoned(NOON.replace(tzinfo=dt.timezone.utc))
    assert ts == TimeStamp(
        year=2021,
        month=1,
        day=1,
        hour=12,
        minute=0,
        second=0,
        microsecond=0,
        offset=TimeStampOffset(hours=0, minutes=0),
    )


@pytest.mark.parametrize(
    "convert, value, expected",
    [
        (civil_date, Date(year=2021), dt.date(2021, 1, 1)),
        (civil_time, TimeStamp(year=2021), dt.time(0, 0, 0, 0)),
    ],
)
def test_missing_parts_get_defaults(convert, value, expected):
    assert convert(value) == expected


def test_zoned_roundtrip_with_offset():
    ts = TimeStamp(
        year=2023,
        month=3,
        day=12,
        hour=19,
        minute=59,
        second=5,
        microsecond=123_400,
        offset=TimeStampOffset(hours=-7, minutes=0),
    )
    zoned = zoned_datetime(ts)
    assert zoned.utcoffset() == dt.timedelta(hours=-7)
    assert timestamp_from_zoned(zoned) == ts


@pytest.mark.parametrize(
    "convert, value, error, component",
    [
        (timestamp_from_zoned, NOON, MissingComponentError, C.OFFSET),
        (civil_date, Date(year=2021, month=2, day=30), InvalidComponentRangeError, C.DATE),
        (civil_date, Date(year=2021, month=0, day=1), InvalidComponentRangeError, C.DATE),
        (civil_time, Time(hour=25), InvalidComponentRangeError, C.TIME),
        (
            zoned_datetime,
            TimeStamp(year=2021, month=1, day=1, offset=TimeStampOffset(hours=25, minutes=0)),
            InvalidComponentRangeError,
            C.OFFSET,
        ),
    ],
)
def test_conversion_errors(convert, value, error, component):
    with pytest.raises(error) as info:
        convert(value)
    assert info.value.component is component