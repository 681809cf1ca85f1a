"""Strict conversions between HL7 values and Python's ``datetime`` types.

Unlike the lenient conversions, these refuse to fill in missing parts: a
date needs a month and a day, a time needs minutes and seconds, and an
aware datetime needs an offset.
"""

from __future__ import annotations

import datetime as _dt
from typing import Union

from hl7stamp.date import Date
from hl7stamp.errors import (
    ErroredDateTimeComponent,
    InvalidComponentRangeError,
    MissingComponentError,
)
from hl7stamp.timeofday import Time
from hl7stamp.timestamp import TimeStamp, TimeStampOffset
from hl7stamp.zoned import (
    civil_date,
    civil_time,
    timestamp_from_civil,
    timestamp_from_zoned,
)


def _require(value: object, *names: str) -> None:
    for name in names:
        if getattr(value, name) is None:
            raise MissingComponentError(ErroredDateTimeComponent[name.upper()])


def strict_date(value: Union[TimeStamp, Date]) -> _dt.date:
    """Convert a ``TimeStamp`` or ``Date`` into a ``datetime.date``.

    Raises ``MissingComponentError`` when the month or day is absent and
    ``InvalidComponentRangeError`` when the values do not form a real date.
    """
    _require(value, "month", "day")
    if not 1 <= value.month <= 12:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.MONTH)
    return civil_date(value)


def strict_time(value: Time) -> _dt.time:
    """Convert an HL7 ``Time`` into a naive ``datetime.time``.

    Minutes and seconds must be present; a missing fraction counts as zero.
    """
    _require(value, "minute", "second")
    return civil_time(value)


def strict_naive_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into a naive ``datetime.datetime``.

    Every component down to the second must be present.
    """
    date = strict_date(value)
    _require(value, "hour", "minute", "second")
    return _dt.datetime.combine(date, civil_time(value))


def _offset_timezone(offset: TimeStampOffset) -> _dt.timezone:
    hours, minutes = offset.hours, offset.minutes
    if not -25 <= hours <= 25 or not 0 <= minutes <= 59:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.OFFSET)
    # The minutes take the sign of the hours.
    if hours < 0:
        minutes = -minutes
    try:
        return _dt.timezone(_dt.timedelta(hours=hours, minutes=minutes))
    except ValueError:
        raise InvalidComponentRangeError(ErroredDateTimeComponent.OFFSET) from None


def strict_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into an aware ``datetime.datetime``.

    The offset must be present, along with every component down to the second.
    """
    _require(value, "offset")
    return strict_naive_datetime(value).replace(tzinfo=_offset_timezone(value.offset))


def timestamp_from_aware(value: _dt.datetime) -> TimeStamp:
    """Convert a ``datetime.datetime`` into a ``TimeStamp``.

    A naive datetime gives a timestamp without an offset.
    """
    if value.utcoffset() is None:
        return timestamp_from_civil(value)
    return timestamp_from_zoned(value)