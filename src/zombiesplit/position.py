from __future__ import annotations

from enum import Enum


class Position(Enum):
    """The component of a time a field or field editor works on.

    Members are declared coarsest first; iterating over the enum walks from
    hours down to milliseconds.
    """

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    @property
    def max(self) -> int:
        return _MAXIMA[self]

    @property
    def cap(self) -> int:
        """Modulus used when reducing a raw magnitude into this position."""
        return _MAXIMA[self] + 1

    @property
    def delimiter(self) -> str | None:
        return _DELIMITERS[self]

    @property
    def ms_offset(self) -> int:
        return _MS_OFFSETS[self]

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_delimiter(cls, char: str) -> "Position":
        key = char.strip().lower()
        if key == ".":
            return cls.MILLISECONDS
        for position in cls:
            if position.delimiter == key:
                return position
        raise ValueError(f"Unknown time field delimiter: {char!r}")

    def __str__(self) -> str:
        return self.value


_MAXIMA = {
    Position.HOURS: 255,
    Position.MINUTES: 59,
    Position.SECONDS: 59,
    Position.MILLISECONDS: 999,
}

_DELIMITERS = {
    Position.HOURS: "h",
    Position.MINUTES: "m",
    Position.SECONDS: "s",
    Position.MILLISECONDS: None,
}

_MS_OFFSETS = {
    Position.HOURS: 60 * 60 * 1000,
    Position.MINUTES: 60 * 1000,
    Position.SECONDS: 1000,
    Position.MILLISECONDS: 1,
}
