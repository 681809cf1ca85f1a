"""HL7 timestamps: parsing and formatting of ``YYYY[MM[DD[HH[MM[SS[.S[S[S[S]]]]]]]]][+/-ZZZZ]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from hl7stamp.errors import ParsingFailedError, UnexpectedCharacterError

_YEAR = re.compile(r"[0-9]{4}")
_REST = re.compile(
    r"([0-9]{2})?"  # month
    r"([0-9]{2})?"  # day
    r"([0-9]{2})?"  # hour
    r"([0-9]{2})?"  # minute
    r"([0-9]{2})?"  # second
    r"(?:\.([0-9]{1,4}))?"  # fractional seconds
    r"([+-])?"  # offset direction
    r"([0-9]{2})?"  # offset hours
    r"([0-9]{2})?"  # offset minutes
)

_FRACTION_SCALE = {1: 100_000, 2: 10_000, 3: 1_000, 4: 100}


def _opt_int(text: Optional[str]) -> Optional[int]:
    return None if text is None else int(text)


def _format_fraction(microsecond: int) -> str:
    return f".{microsecond:06d}"[:5]


@dataclass(frozen=True)
class TimeStampOffset:
    """A timezone offset. Negative hours lie behind UTC, positive ahead."""

    hours: int = 0
    minutes: int = 0

    def __str__(self) -> str:
        return f"{self.hours:+03d}{self.minutes:02d}"


@dataclass(frozen=True)
class TimeStamp:
    """A parsed HL7 timestamp. The values are not checked for calendar validity."""

    year: int = 0
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    microsecond: Optional[int] = None
    offset: Optional[TimeStampOffset] = None

    @classmethod
    def parse(cls, s: str, lenient_trailing_chars: bool = False) -> "TimeStamp":
        """Parse ``s``; trailing characters are allowed only when lenient."""
        return parse_timestamp(s, lenient_trailing_chars)

    @classmethod
    def parse_strict(cls, s: str) -> "TimeStamp":
        """Parse ``s``, rejecting any trailing characters."""
        return parse_timestamp(s, False)

    def __str__(self) -> str:
        parts = [f"{self.year:04d}"]
        chain = (self.month, self.day, self.hour, self.minute, self.second)
        complete = True
        for value in chain:
            if value is None:
                complete = False
                break
            parts.append(f"{value:02d}")
        if complete and self.microsecond is not None:
            parts.append(_format_fraction(self.microsecond))
        if self.offset is not None:
            parts.append(str(self.offset))
        return "".join(parts)


def parse_timestamp(s: str, lenient_trailing_chars: bool = False) -> TimeStamp:
    """Parse an HL7 timestamp string.

    Raises ``ParsingFailedError`` when the year is missing and, unless
    ``lenient_trailing_chars`` is set, ``UnexpectedCharacterError`` when
    characters remain after the timestamp.
    """
    if not _YEAR.match(s):
        raise ParsingFailedError("year")
    year = int(s[:4])
    match = _REST.match(s, 4)
    (month, day, hour, minute, second, fraction, sign, off_hours, off_minutes) = (
        match.groups()
    )
    end = match.end()

    if not lenient_trailing_chars and end < len(s):
        raise UnexpectedCharacterError(end, s[end])

    microsecond = None
    if fraction is not None:
        microsecond = int(fraction) * _FRACTION_SCALE[len(fraction)]

    offset = None
    if off_hours is not None and off_minutes is not None:
        direction = -1 if sign == "-" else 1
        offset = TimeStampOffset(hours=int(off_hours) * direction, minutes=int(off_minutes))

    return TimeStamp(
        year=year,
        month=_opt_int(month),
        day=_opt_int(day),
        hour=_opt_int(hour),
        minute=_opt_int(minute),
        second=_opt_int(second),
        microsecond=microsecond,
        offset=offset,
    )