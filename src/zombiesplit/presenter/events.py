"""Events the presenter understands.

Modes get the first look at each event; anything a mode reports as unhandled
falls through to the presenter (``Commit``, ``NewRun`` and ``Quit`` are only
ever handled there).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..position import Position
from .cursor import Motion


@dataclass(frozen=True, slots=True)
class Add:
    digit: int

    def __post_init__(self) -> None:
        if not 0 <= self.digit <= 9:
            raise ValueError(f"Not a decimal digit: {self.digit}")


@dataclass(frozen=True, slots=True)
class Remove:
    pass


EditAction = Union[Add, Remove]


@dataclass(frozen=True, slots=True)
class Edit:
    action: EditAction


@dataclass(frozen=True, slots=True)
class EnterField:
    position: Position


@dataclass(frozen=True, slots=True)
class CursorMotion:
    motion: Motion


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class Commit:
    pass


@dataclass(frozen=True, slots=True)
class NewRun:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Event = Union[Edit, EnterField, CursorMotion, Undo, Delete, Commit, NewRun, Quit]
