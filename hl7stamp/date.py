"""HL7 dates: parsing and formatting of ``YYYY[MM[DD]]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from hl7stamp.errors import ParsingFailedError, UnexpectedCharacterError
from hl7stamp.timestamp import TimeStamp

_DATE = re.compile(r"([0-9]{4})([0-9]{2})?([0-9]{2})?")


@dataclass(frozen=True)
class Date:
    """A parsed date without a time component."""

    year: int = 0
    month: Optional[int] = None
    day: Optional[int] = None

    @classmethod
    def parse(cls, s: str, lenient_trailing_chars: bool = False) -> "Date":
        """Same as ``parse_date``."""
        return parse_date(s, lenient_trailing_chars)

    @classmethod
    def parse_strict(cls, s: str) -> "Date":
        """Same as ``parse_date`` without leniency."""
        return parse_date(s, False)

    def __str__(self) -> str:
        return str(TimeStamp(year=self.year, month=self.month, day=self.day))


def parse_date(s: str, lenient_trailing_chars: bool = False) -> Date:
    """Parse an HL7 date string.

    Raises ``ParsingFailedError`` when the year is missing and, unless
    ``lenient_trailing_chars`` is set, ``UnexpectedCharacterError`` when
    characters remain after the date.
    """
    match = _DATE.match(s)
    if match is None:
        raise ParsingFailedError("year")
    end = match.end()
    if not lenient_trailing_chars and end < len(s):
        raise UnexpectedCharacterError(end, s[end])

    year, month, day = (None if part is None else int(part) for part in match.groups())
    return Date(year=year, month=month, day=day)