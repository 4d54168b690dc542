from __future__ import annotations

import structlog

from ..models import Run
from .cursor import Cursor, Motion
from .events import CursorMotion, Delete, EnterField, Event, Undo
from .mode import EventResult, Inactive, Mode

logger = structlog.get_logger(__name__)


class Nav(Mode):
    """Moving between splits, with no time being edited."""

    def __init__(self, cursor: Cursor) -> None:
        self._cursor = cursor

    @classmethod
    def transition(cls, cursor: Cursor) -> EventResult:
        return EventResult.transition(cls(cursor))

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def handle_event(self, event: Event, run: Run) -> EventResult:
        if isinstance(event, CursorMotion):
            return self.move_cursor(event.motion)
        if isinstance(event, EnterField):
            from .editor import Editor  # lazy import to avoid cycle

            return EventResult.transition(Editor(self._cursor, event.position))
        if isinstance(event, Undo):
            popped = run.pop_from(self._cursor.position)
            if popped is not None:
                logger.debug("time removed", split=self._cursor.position, time=str(popped))
            return EventResult.from_handled(popped is not None)
        if isinstance(event, Delete):
            index = self._cursor.position
            if not run.splits[index].has_times:
                return EventResult.not_handled()
            run.clear_at(index)
            logger.debug("split cleared", split=index)
            return EventResult.handled()
        return EventResult.not_handled()

    def move_cursor(self, motion: Motion) -> EventResult:
        candidate, distance = self._cursor.moved(motion)
        if distance == 0:
            if motion is Motion.DOWN:
                # Moving off the last split ends the run.
                return EventResult.transition(Inactive())
            return EventResult.not_handled()
        self._cursor = candidate
        return EventResult.handled()

    def __repr__(self) -> str:
        return f"Nav(position={self._cursor.position})"
