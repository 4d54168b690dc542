from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Motion(Enum):
    UP = "up"
    DOWN = "down"
    TOP = "top"
    BOTTOM = "bottom"


class SplitPosition(Enum):
    """Where a split sits relative to the cursor."""

    DONE = "done"
    CURSOR = "cursor"
    COMING = "coming"


@dataclass(slots=True)
class Cursor:
    """A position within a run's splits, from 0 to ``limit`` inclusive."""

    position: int = 0
    limit: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"Cursor limit cannot be negative: {self.limit}")
        if not 0 <= self.position <= self.limit:
            raise ValueError(f"Cursor position {self.position} outside 0..{self.limit}")

    def moved(self, motion: Motion, amount: int = 1) -> tuple["Cursor", int]:
        """Works out where ``motion`` would take the cursor without moving it.

        Returns the candidate cursor and the distance actually travelled,
        which is less than ``amount`` when the motion runs into either end.
        """
        if motion is Motion.UP:
            target = max(0, self.position - amount)
        elif motion is Motion.DOWN:
            target = min(self.limit, self.position + amount)
        elif motion is Motion.TOP:
            target = 0
        else:
            target = self.limit
        return replace(self, position=target), abs(target - self.position)

    def move_by(self, motion: Motion, amount: int = 1) -> int:
        candidate, distance = self.moved(motion, amount)
        self.position = candidate.position
        return distance

    def split_position(self, index: int) -> SplitPosition:
        if index < self.position:
            return SplitPosition.DONE
        if index == self.position:
            return SplitPosition.CURSOR
        return SplitPosition.COMING
