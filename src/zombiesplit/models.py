from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .timing import Time


class Pace(str, Enum):
    PERSONAL_BEST = "personal_best"
    AHEAD = "ahead"
    BEHIND = "behind"
    INCONCLUSIVE = "inconclusive"


@dataclass(slots=True)
class Split:
    short: str
    name: str
    times: list[Time] = field(default_factory=list)
    comparison: Time | None = None

    @property
    def total(self) -> Time:
        return Time.total(self.times)

    @property
    def has_times(self) -> bool:
        return bool(self.times)


@dataclass(slots=True)
class Run:
    """An attempt at a category: the splits and the times recorded against them."""

    game: str
    category: str
    splits: list[Split] = field(default_factory=list)
    attempt: int = 1

    def __len__(self) -> int:
        return len(self.splits)

    def push_to(self, index: int, time: Time) -> None:
        self._split(index).times.append(time)

    def pop_from(self, index: int) -> Time | None:
        times = self._split(index).times
        return times.pop() if times else None

    def clear_at(self, index: int) -> None:
        self._split(index).times.clear()

    def reset(self) -> None:
        for split in self.splits:
            split.times.clear()
        self.attempt += 1

    def split_total(self, index: int) -> Time:
        return self._split(index).total

    def total_at(self, index: int) -> Time:
        self._split(index)
        return Time.total(split.total for split in self.splits[: index + 1])

    def comparison_total_at(self, index: int) -> Time | None:
        self._split(index)
        comparisons = [split.comparison for split in self.splits[: index + 1]]
        if any(value is None for value in comparisons):
            return None
        return Time.total(value for value in comparisons if value is not None)

    def pace_at(self, index: int) -> Pace:
        split = self._split(index)
        if not split.has_times or split.comparison is None:
            return Pace.INCONCLUSIVE
        if split.total < split.comparison:
            return Pace.PERSONAL_BEST
        comparison_total = self.comparison_total_at(index)
        if comparison_total is None:
            return Pace.INCONCLUSIVE
        total = self.total_at(index)
        if total < comparison_total:
            return Pace.AHEAD
        if total > comparison_total:
            return Pace.BEHIND
        return Pace.INCONCLUSIVE

    def _split(self, index: int) -> Split:
        if not 0 <= index < len(self.splits):
            raise IndexError(f"Split {index} out of range for a run of {len(self.splits)} splits")
        return self.splits[index]
