"""Lenient conversions between HL7 values and civil or zoned ``datetime`` values.

Missing date parts default to 1, missing time parts to 0 and a missing
offset to UTC.
"""

from __future__ import annotations

import datetime as _dt
from typing import Optional, Union

from hl7stamp.date import Date
from hl7stamp.errors import (
    ErroredDateTimeComponent,
    InvalidComponentRangeError,
    MissingComponentError,
)
from hl7stamp.timeofday import Time
from hl7stamp.timestamp import TimeStamp, TimeStampOffset


def _or(value: Optional[int], default: int) -> int:
    return default if value is None else value


def civil_date(value: Union[TimeStamp, Date]) -> _dt.date:
    """Convert a ``TimeStamp`` or ``Date`` into a ``datetime.date``."""
    try:
        return _dt.date(value.year, _or(value.month, 1), _or(value.day, 1))
    except ValueError:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.DATE) from None


def civil_time(value: Union[TimeStamp, Time]) -> _dt.time:
    """Convert a ``TimeStamp`` or HL7 ``Time`` into a naive ``datetime.time``."""
    parts = (value.hour, value.minute, value.second, value.microsecond)
    try:
        return _dt.time(*(_or(part, 0) for part in parts))
    except ValueError:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.TIME) from None


def civil_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into a naive ``datetime.datetime``, ignoring its offset."""
    return _dt.datetime.combine(civil_date(value), civil_time(value))


def zoned_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into an aware datetime in its fixed offset (UTC if absent)."""
    offset = TimeStampOffset() if value.offset is None else value.offset
    seconds = offset.hours * 3600 + offset.minutes * 60
    try:
        tz = _dt.timezone(_dt.timedelta(seconds=seconds))
    except ValueError:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.OFFSET) from None
    return civil_datetime(value).replace(tzinfo=tz)


def _timestamp(
    value: Union[_dt.date, _dt.datetime], offset: Optional[TimeStampOffset] = None
) -> TimeStamp:
    if not isinstance(value, _dt.datetime):
        return TimeStamp(year=value.year, month=value.month, day=value.day)
    return TimeStamp(
        year=value.year,
        month=value.month,
        day=value.day,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=value.microsecond,
        offset=offset,
    )


def timestamp_from_civil(value: Union[_dt.date, _dt.datetime]) -> TimeStamp:
    """Convert a civil date or datetime into a ``TimeStamp`` without an offset."""
    return _timestamp(value)


def timestamp_from_zoned(value: _dt.datetime) -> TimeStamp:
    """Convert an aware datetime into a ``TimeStamp`` carrying its offset.

    Raises ``MissingComponentError`` for a naive datetime.
    """
    delta = value.utcoffset()
    if delta is None:
        raise MissingComponentError(ErroredDateTimeComponent.OFFSET)
    seconds = int(delta.total_seconds())
    hours, rest = divmod(abs(seconds), 3600)
    offset = TimeStampOffset(hours=-hours if seconds < 0 else hours, minutes=rest // 60)
    return _timestamp(value, offset)