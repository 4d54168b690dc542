"""Bounded time fields and the hh/mm/ss/ms durations built from them.

The compact text form is ``[<h>h][<m>m]<s>s[<ms>]``: every delimited
component is optional on input, and trailing digits with no delimiter are the
millisecond component.  Components are consumed left to right, so a bare
number such as ``"123"`` is read as 123 milliseconds, not seconds.

Milliseconds are a count, not a decimal fraction: ``"1s5"`` is one second
and five milliseconds.  Output always writes them as three digits
(``"1s005"``) so they cannot be mistaken for tenths; input accepts one to
three digits.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Mapping

from .carry import Carry
from .errors import FieldParseError, FieldTooBigError, TimeOverflowError
from .position import Position


class HourOverflow(Enum):
    """What addition does when the hours field itself overflows."""

    WRAP = "wrap"
    SATURATE = "saturate"
    ERROR = "error"


@dataclass(frozen=True, order=True, slots=True)
class Field:
    """One component of a time, never larger than its position's maximum."""

    position: Position
    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.position} field cannot be negative: {self.value}")
        if self.value > self.position.max:
            raise FieldTooBigError(self.position, self.value)

    @classmethod
    def zero(cls, position: Position) -> "Field":
        return cls(position, 0)

    @classmethod
    def new_with_carry(cls, position: Position, value: int) -> Carry["Field"]:
        """Fits as much of ``value`` as possible into a field.

        The returned carry holds how many whole units of the next coarser
        position did not fit, e.g. 64 seconds is 4 seconds carrying 1.
        """
        return Carry.from_division(value, position.cap).map(lambda reduced: cls(position, reduced))

    @classmethod
    def try_from(cls, position: Position, value: int) -> "Field":
        result = cls.new_with_carry(position, value)
        if result.carry:
            raise FieldTooBigError(position, result.original)
        return result.value

    @classmethod
    def parse(cls, position: Position, text: str) -> "Field":
        """Parses a bare number; the empty string is the zero field."""
        if not text:
            return cls.zero(position)
        if not (text.isascii() and text.isdigit()):
            raise FieldParseError(position, text)
        return cls.try_from(position, int(text))

    @classmethod
    def parse_delimited(cls, position: Position, text: str) -> tuple["Field", str]:
        """Parses this position's component off the front of ``text``.

        Returns the field and the unconsumed remainder.  If the delimiter is
        missing the field is zero and nothing is consumed.
        """
        delimiter = position.delimiter
        if delimiter is None:
            return cls.parse(position, text), ""
        index = text.find(delimiter)
        if index == -1:
            return cls.zero(position), text
        return cls.parse(position, text[:index]), text[index + len(delimiter):]

    def as_msecs(self) -> int:
        return self.value * self.position.ms_offset

    def delimited(self) -> str:
        """Value followed by its delimiter, or nothing if the field is zero."""
        if not self.value:
            return ""
        return f"{self.value}{self.position.delimiter or ''}"

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def padded(self) -> str:
        """Value zero-padded to the position's digit width (hours are never padded)."""
        return str(self.value).zfill(_WIDTHS[self.position])

    def __str__(self) -> str:
        return str(self.value)


_ATTRIBUTES = {
    Position.HOURS: "hours",
    Position.MINUTES: "mins",
    Position.SECONDS: "secs",
    Position.MILLISECONDS: "millis",
}

_WIDTHS = {
    Position.HOURS: 1,
    Position.MINUTES: 2,
    Position.SECONDS: 2,
    Position.MILLISECONDS: 3,
}

_FINEST_FIRST = tuple(reversed(list(Position)))


@dataclass(order=True, slots=True)
class Time:
    """An elapsed duration with hours, minutes, seconds and milliseconds.

    Field order makes the generated comparisons agree with total duration.
    """

    hours: Field = field(default_factory=lambda: Field.zero(Position.HOURS))
    mins: Field = field(default_factory=lambda: Field.zero(Position.MINUTES))
    secs: Field = field(default_factory=lambda: Field.zero(Position.SECONDS))
    millis: Field = field(default_factory=lambda: Field.zero(Position.MILLISECONDS))

    @classmethod
    def of(cls, hours: int = 0, mins: int = 0, secs: int = 0, millis: int = 0) -> "Time":
        """Builds a time from raw values, each of which must fit its field."""
        return cls(
            hours=Field.try_from(Position.HOURS, hours),
            mins=Field.try_from(Position.MINUTES, mins),
            secs=Field.try_from(Position.SECONDS, secs),
            millis=Field.try_from(Position.MILLISECONDS, millis),
        )

    @classmethod
    def zero(cls) -> "Time":
        return cls()

    @classmethod
    def maximum(cls) -> "Time":
        return cls.of(*(position.max for position in Position))

    @classmethod
    def parse(cls, text: str) -> "Time":
        remainder = text.strip()
        hours, remainder = Field.parse_delimited(Position.HOURS, remainder)
        mins, remainder = Field.parse_delimited(Position.MINUTES, remainder)
        secs, remainder = Field.parse_delimited(Position.SECONDS, remainder)
        millis = Field.parse(Position.MILLISECONDS, remainder)
        return cls(hours=hours, mins=mins, secs=secs, millis=millis)

    from_str = parse

    @classmethod
    def from_msecs(cls, msecs: int, overflow: HourOverflow = HourOverflow.WRAP) -> "Time":
        return cls._carried({Position.MILLISECONDS: msecs}, overflow)

    @classmethod
    def total(cls, times: Iterable["Time"], overflow: HourOverflow = HourOverflow.WRAP) -> "Time":
        result = cls()
        for item in times:
            result = result.add(item, overflow=overflow)
        return result

    @classmethod
    def _carried(cls, amounts: Mapping[Position, int], overflow: HourOverflow) -> "Time":
        # Finest to coarsest, feeding each quotient into the next field up.
        fields: dict[Position, Field] = {}
        carry = 0
        top: Carry[Field] | None = None
        for position in _FINEST_FIRST:
            top = Field.new_with_carry(position, amounts.get(position, 0) + carry)
            fields[position] = top.value
            carry = top.carry
        if carry and top is not None:
            if overflow is HourOverflow.ERROR:
                raise TimeOverflowError(top.original)
            if overflow is HourOverflow.SATURATE:
                return cls.maximum()
        return cls(**{_ATTRIBUTES[position]: value for position, value in fields.items()})

    def add(self, other: "Time", overflow: HourOverflow = HourOverflow.WRAP) -> "Time":
        amounts = {
            position: int(self.field_at(position)) + int(other.field_at(position))
            for position in Position
        }
        return self._carried(amounts, overflow)

    def __add__(self, other: object) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return self.add(other)

    def field_at(self, position: Position) -> Field:
        return getattr(self, _ATTRIBUTES[position])

    def with_field(self, value: Field) -> "Time":
        return replace(self, **{_ATTRIBUTES[value.position]: value})

    def set_field_str(self, position: Position, text: str) -> None:
        """Re-parses one component from ``text`` and stores it on this time."""
        setattr(self, _ATTRIBUTES[position], Field.parse(position, text))

    def is_zero(self) -> bool:
        return not any(self.field_at(position) for position in Position)

    def as_msecs(self) -> int:
        return sum(self.field_at(position).as_msecs() for position in Position)

    def __str__(self) -> str:
        text = f"{self.hours.delimited()}{self.mins.delimited()}{self.secs.value}s"
        if self.millis:
            text += self.millis.padded()
        return text
