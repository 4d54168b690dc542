"""The split editor: typing a time in one field at a time."""

from __future__ import annotations

import structlog

from ..errors import TimeError
from ..models import Run
from ..position import Position
from ..timing import Time
from .cursor import Cursor, Motion
from .events import Add, CursorMotion, Delete, Edit, EditAction, EnterField, Event, Remove, Undo
from .mode import EventResult, Inactive, Mode
from .nav import Nav

logger = structlog.get_logger(__name__)


def max_digits(position: Position) -> int:
    if position is Position.HOURS:
        return 0  # hours are not editable yet
    if position is Position.MILLISECONDS:
        return 3
    return 2


class FieldEditor:
    """A digit buffer for one field of the time being edited."""

    def __init__(self, position: Position) -> None:
        self._position = position
        self._text = ""

    @property
    def position(self) -> Position:
        return self._position

    @property
    def text(self) -> str:
        return self._text

    @property
    def max_digits(self) -> int:
        return max_digits(self._position)

    def edit(self, action: EditAction) -> bool:
        if isinstance(action, Add):
            return self.add(action.digit)
        if isinstance(action, Remove):
            return self.remove()
        return False

    def add(self, digit: int) -> bool:
        if len(self._text) >= self.max_digits:
            return False
        self._text += str(digit)
        return True

    def remove(self) -> bool:
        if not self._text:
            return False
        self._text = self._text[:-1]
        return True

    def commit(self, time: Time) -> None:
        """Writes the buffer into ``time``.

        Raises ``TimeError`` if the digits do not fit the field, such as
        ``"75"`` for minutes.
        """
        time.set_field_str(self._position, self._text)

    def __str__(self) -> str:
        return self._text.ljust(self.max_digits, "_")

    def __repr__(self) -> str:
        return f"FieldEditor({self._position}, {self._text!r})"


class Editor(Mode):
    """Editing the time of the split under the cursor."""

    def __init__(self, cursor: Cursor, field: Position | None = None) -> None:
        self.cur = cursor
        self.time = Time()
        self.field: FieldEditor | None = FieldEditor(field) if field is not None else None
        self.error: TimeError | None = None

    @classmethod
    def with_time(cls, cursor: Cursor, time: Time) -> "Editor":
        editor = cls(cursor)
        editor.time = time
        return editor

    @property
    def cursor(self) -> Cursor:
        return self.cur

    @property
    def editor(self) -> "Editor":
        return self

    def handle_event(self, event: Event, run: Run) -> EventResult:
        if isinstance(event, Undo):
            return self.undo()
        if isinstance(event, Delete):
            return self.delete()
        if isinstance(event, Edit):
            return self.edit(event.action)
        if isinstance(event, EnterField):
            return self.enter_field(event.position)
        if isinstance(event, CursorMotion):
            return self.move_cursor(event.motion)
        return EventResult.not_handled()

    def commit(self, run: Run) -> None:
        self.commit_field()
        time, self.time = self.time, Time()
        run.push_to(self.cur.position, time)
        logger.debug("time committed", split=self.cur.position, time=str(time))

    def enter_field(self, position: Position) -> EventResult:
        self.commit_field()
        self.field = FieldEditor(position)
        return EventResult.handled()

    def edit(self, action: EditAction) -> EventResult:
        if self.field is None:
            return EventResult.not_handled()
        return EventResult.from_handled(self.field.edit(action))

    def undo(self) -> EventResult:
        if self.field is not None:
            self.field = None
            return EventResult.handled()
        if self.time.is_zero():
            return EventResult.not_handled()
        self.time = Time()
        return EventResult.handled()

    def delete(self) -> EventResult:
        self.field = None
        self.time = Time()
        return Nav.transition(self.cur)

    def commit_field(self) -> TimeError | None:
        """Folds the open field editor, if any, into the time and closes it.

        A field that does not fit is dropped; the error is kept on
        ``self.error`` for the UI and also returned.
        """
        field, self.field = self.field, None
        if field is None:
            return None
        try:
            field.commit(self.time)
        except TimeError as exc:
            logger.warning("field commit failed", position=str(field.position), text=field.text, error=str(exc))
            self.error = exc
            return exc
        self.error = None
        return None

    def move_cursor(self, motion: Motion) -> EventResult:
        # Probe on a copy so the edit still commits at the original split.
        candidate, distance = self.cur.moved(motion, 1)
        if distance != 1 and motion is Motion.DOWN:
            return EventResult.transition(Inactive())
        return Nav.transition(candidate)

    def __repr__(self) -> str:
        return f"Editor(position={self.cur.position}, time={self.time}, field={self.field!r})"
