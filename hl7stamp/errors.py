"""Errors raised while parsing or converting HL7 dates and times."""

from __future__ import annotations

from enum import Enum


class ErroredDateTimeComponent(Enum):
    """The part of a date or time that an error refers to."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"
    OFFSET = "offset"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date and time"

    def __str__(self) -> str:
        return self.value


class DateTimeParseError(ValueError):
    """Base class for every date and time error in this package."""


class ParsingFailedError(DateTimeParseError):
    """A named part of the input could not be parsed."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"Failed to parse '{component}' component of timestamp")


class UnexpectedCharacterError(DateTimeParseError):
    """Characters were left over after a strict parse."""

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(
            f"Unexpected character '{character}' in timestamp at position {position}"
        )


class InvalidComponentRangeError(DateTimeParseError):
    """A component was parsed but lies outside its valid range."""

    def __init__(self, component: ErroredDateTimeComponent) -> None:
        self.component = component
        super().__init__(f"Invalid component range: {component}")


class AmbiguousTimeError(DateTimeParseError):
    """A local time maps to more than one instant."""

    def __init__(self, earliest: str, latest: str) -> None:
        self.earliest = earliest
        self.latest = latest
        super().__init__(f"Ambiguous time, could be {earliest} or {latest}")


class MissingComponentError(DateTimeParseError):
    """A component needed for a conversion is absent."""

    def __init__(self, component: ErroredDateTimeComponent) -> None:
        self.component = component
        super().__init__(f"Missing component: {component}")