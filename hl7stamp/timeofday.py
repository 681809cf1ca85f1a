"""HL7 times of day: parsing and formatting of ``HH[MM[SS[.S[S[S[S]]]]]][+/-ZZZZ]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from hl7stamp.errors import ParsingFailedError, UnexpectedCharacterError
from hl7stamp.timestamp import TimeStampOffset

_HOUR = re.compile(r"[0-9]{2}")
_REST = re.compile(
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


@dataclass(frozen=True)
class Time:
    """A parsed HL7 time of day. The values are not checked for validity."""

    hour: int = 0
    minute: Optional[int] = None
    second: Optional[int] = None
    microsecond: Optional[int] = None
    offset: Optional[TimeStampOffset] = None

    @classmethod
    def parse(cls, s: str, lenient_trailing_chars: bool = False) -> "Time":
        """Parse ``s``; trailing characters are allowed only when lenient."""
        return parse_time(s, lenient_trailing_chars)

    @classmethod
    def parse_strict(cls, s: str) -> "Time":
        """Parse ``s``, rejecting any trailing characters."""
        return parse_time(s, False)

    def __str__(self) -> str:
        parts = [f"{self.hour:02d}"]
        if self.minute is not None:
            parts.append(f"{self.minute:02d}")
            if self.second is not None:
                parts.append(f"{self.second:02d}")
                if self.microsecond is not None:
                    parts.append(f".{self.microsecond:06d}"[:5])
        if self.offset is not None:
            parts.append(str(self.offset))
        return "".join(parts)


def parse_time(s: str, lenient_trailing_chars: bool = False) -> Time:
    """Parse an HL7 time string.

    Raises ``ParsingFailedError`` when the hour is missing and, unless
    ``lenient_trailing_chars`` is set, ``UnexpectedCharacterError`` when
    characters remain after the time.
    """
    if not _HOUR.match(s):
        raise ParsingFailedError("hour")
    hour = int(s[:2])
    match = _REST.match(s, 2)
    minute, second, fraction, sign, off_hours, off_minutes = match.groups()
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

    return Time(
        hour=hour,
        minute=_opt_int(minute),
        second=_opt_int(second),
        microsecond=microsecond,
        offset=offset,
    )