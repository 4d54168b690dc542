from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..models import Run
from .cursor import Cursor
from .events import Event

if TYPE_CHECKING:  # pragma: no cover
    from .editor import Editor


class Outcome(Enum):
    HANDLED = "handled"
    NOT_HANDLED = "not_handled"
    TRANSITION = "transition"


@dataclass(frozen=True, slots=True)
class EventResult:
    outcome: Outcome
    next_mode: "Mode | None" = None

    @classmethod
    def handled(cls) -> "EventResult":
        return cls(Outcome.HANDLED)

    @classmethod
    def not_handled(cls) -> "EventResult":
        return cls(Outcome.NOT_HANDLED)

    @classmethod
    def transition(cls, mode: "Mode") -> "EventResult":
        return cls(Outcome.TRANSITION, mode)

    @classmethod
    def from_handled(cls, handled: bool) -> "EventResult":
        return cls.handled() if handled else cls.not_handled()

    @property
    def is_handled(self) -> bool:
        return self.outcome is not Outcome.NOT_HANDLED


class Mode:
    """One of the presenter's interactive states.

    Subclasses override ``handle_event`` and, if they hold uncommitted work,
    ``commit``.  The presenter calls ``commit`` on the outgoing mode whenever
    it switches to another.
    """

    def handle_event(self, event: Event, run: Run) -> EventResult:
        return EventResult.not_handled()

    def commit(self, run: Run) -> None:
        return None

    @property
    def cursor(self) -> Cursor | None:
        return None

    @property
    def editor(self) -> "Editor | None":
        return None

    def __repr__(self) -> str:
        return type(self).__name__


class Inactive(Mode):
    """The run is over (or has no splits); only presenter-level events apply."""
