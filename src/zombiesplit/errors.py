from __future__ import annotations

from .position import Position


class TimeError(ValueError):
    """Base class for errors raised while building or parsing times."""


class FieldParseError(TimeError):
    def __init__(self, position: Position, text: str) -> None:
        self.position = position
        self.text = text
        super().__init__(f"field {position} failed parsing: {text!r} is not a whole number")


class FieldTooBigError(TimeError):
    def __init__(self, position: Position, value: int) -> None:
        self.position = position
        self.value = value
        self.maximum = position.max
        super().__init__(f"field {position} too big: was {value}, max {position.max}")


class TimeOverflowError(TimeError):
    """Raised when a sum does not fit in the hours field and overflow is an error."""

    def __init__(self, hours: int) -> None:
        self.hours = hours
        super().__init__(f"time overflowed: {hours} hours exceeds max {Position.HOURS.max}")
