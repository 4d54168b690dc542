from __future__ import annotations

from ..position import Position
from ..presenter.cursor import Motion
from ..presenter.events import (
    Add,
    Commit,
    CursorMotion,
    Delete,
    Edit,
    EnterField,
    Event,
    NewRun,
    Quit,
    Remove,
    Undo,
)

# (key, event, footer description, shown in footer)
KEYMAP: list[tuple[str, Event, str, bool]] = [
    ("q", Quit(), "Quit", True),
    ("enter", Commit(), "Commit", True),
    ("n", NewRun(), "New Run", True),
    ("u", Undo(), "Undo", True),
    ("x", Delete(), "Delete", False),
    ("delete", Delete(), "Delete", True),
    ("backspace", Edit(Remove()), "Erase Digit", False),
    ("h", EnterField(Position.HOURS), "Hours", False),
    ("m", EnterField(Position.MINUTES), "Minutes", True),
    ("s", EnterField(Position.SECONDS), "Seconds", True),
    ("full_stop", EnterField(Position.MILLISECONDS), "Milliseconds", True),
    ("j", CursorMotion(Motion.DOWN), "Next Split", False),
    ("k", CursorMotion(Motion.UP), "Previous Split", False),
    ("down", CursorMotion(Motion.DOWN), "Next Split", True),
    ("up", CursorMotion(Motion.UP), "Previous Split", True),
    ("g", CursorMotion(Motion.TOP), "First Split", False),
    ("home", CursorMotion(Motion.TOP), "First Split", False),
    ("G", CursorMotion(Motion.BOTTOM), "Last Split", False),
    ("end", CursorMotion(Motion.BOTTOM), "Last Split", False),
]

DIGIT_KEYS = [str(digit) for digit in range(10)]

_EVENTS = {key: event for key, event, _, _ in KEYMAP}


def event_for_key(key: str) -> Event | None:
    if key in DIGIT_KEYS:
        return Edit(Add(int(key)))
    return _EVENTS.get(key)
