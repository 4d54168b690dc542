from __future__ import annotations

import structlog

from ..models import Run
from .cursor import Cursor, Motion, SplitPosition
from .editor import Editor
from .events import Commit, Event, NewRun, Quit
from .mode import Inactive, Mode, Outcome
from .nav import Nav

logger = structlog.get_logger(__name__)


class Presenter:
    """Owns a run and the current mode, and feeds events through them."""

    def __init__(self, run: Run) -> None:
        self.run = run
        self.mode: Mode = self._initial_mode()
        self._running = True

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def cursor(self) -> Cursor | None:
        return self.mode.cursor

    @property
    def editor(self) -> Editor | None:
        return self.mode.editor

    def split_position(self, index: int) -> SplitPosition:
        cursor = self.mode.cursor
        if cursor is None:
            return SplitPosition.DONE
        return cursor.split_position(index)

    def handle_event(self, event: Event) -> None:
        result = self.mode.handle_event(event, self.run)
        if result.outcome is Outcome.TRANSITION and result.next_mode is not None:
            self.transition(result.next_mode)
        elif result.outcome is Outcome.NOT_HANDLED:
            self._handle_unclaimed(event)

    def transition(self, mode: Mode) -> None:
        """Commits the current mode into the run, then switches to ``mode``."""
        self.mode.commit(self.run)
        logger.debug("mode transition", old=repr(self.mode), new=repr(mode))
        self.mode = mode

    def _handle_unclaimed(self, event: Event) -> None:
        if isinstance(event, Commit):
            self._commit_and_advance()
        elif isinstance(event, NewRun):
            self.run.reset()
            self.mode = self._initial_mode()
            logger.debug("new run", attempt=self.run.attempt)
        elif isinstance(event, Quit):
            self.mode.commit(self.run)
            self._running = False

    def _commit_and_advance(self) -> None:
        cursor = self.mode.cursor
        if cursor is None:
            return
        candidate, distance = cursor.moved(Motion.DOWN)
        self.transition(Nav(candidate) if distance else Inactive())

    def _initial_mode(self) -> Mode:
        if not self.run.splits:
            return Inactive()
        return Nav(Cursor(0, len(self.run) - 1))
