"""Conversions between HL7 values and Python's ``datetime`` types.

Converting an HL7 value into a ``datetime`` type fills in what is missing:
absent date parts become 1, absent time parts become 0 and an absent
offset becomes UTC. Values that do not form a real date, time or offset
raise ``InvalidComponentRangeError``.
"""

from __future__ import annotations

import datetime as _dt
from typing import Union

from hl7stamp.date import Date
from hl7stamp.strict import timestamp_from_aware
from hl7stamp.timeofday import Time
from hl7stamp.timestamp import TimeStamp
from hl7stamp.zoned import (
    civil_date,
    civil_datetime,
    civil_time,
    timestamp_from_civil,
    zoned_datetime,
)


def to_date(value: Union[TimeStamp, Date]) -> _dt.date:
    """Convert a ``TimeStamp`` or ``Date`` into a ``datetime.date``; a missing month or day is 1."""
    return civil_date(value)


def to_time(value: Union[Time, TimeStamp]) -> _dt.time:
    """Convert an HL7 ``Time`` (or a ``TimeStamp``'s time part) into a naive ``datetime.time``.

    Missing components are taken to be zero; any offset is ignored.
    """
    return civil_time(value)


def to_naive_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into a naive ``datetime.datetime``, ignoring its offset."""
    return civil_datetime(value)


def to_datetime(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into an aware datetime in its fixed offset.

    A missing offset is taken to be UTC. The offset's minutes are added to
    its hours as given.
    """
    return zoned_datetime(value)


def to_utc(value: TimeStamp) -> _dt.datetime:
    """Convert a ``TimeStamp`` into an aware datetime expressed in UTC."""
    return zoned_datetime(value).astimezone(_dt.timezone.utc)


def timestamp_from_date(value: _dt.date) -> TimeStamp:
    """Convert a ``datetime.date`` into a ``TimeStamp`` with no time or offset."""
    return timestamp_from_civil(_dt.date(value.year, value.month, value.day))


def date_from_python(value: _dt.date) -> Date:
    """Convert a ``datetime.date`` into an HL7 ``Date``."""
    return Date(year=value.year, month=value.month, day=value.day)


def time_from_python(value: _dt.time) -> Time:
    """Convert a ``datetime.time`` into an HL7 ``Time`` without an offset."""
    return Time(
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=value.microsecond,
        offset=None,
    )


def timestamp_from_datetime(value: _dt.datetime) -> TimeStamp:
    """Convert a ``datetime.datetime`` into a ``TimeStamp``.

    An aware datetime keeps its offset; a naive one gives no offset.
    """
    return timestamp_from_aware(value)