"""Interactive state: modes, the split editor and the presenter tying them to a run."""

from .core import Presenter
from .cursor import Cursor, Motion, SplitPosition
from .editor import Editor, FieldEditor
from .mode import EventResult, Inactive, Mode, Outcome
from .nav import Nav

__all__ = [
    "Cursor",
    "Editor",
    "EventResult",
    "FieldEditor",
    "Inactive",
    "Mode",
    "Motion",
    "Nav",
    "Outcome",
    "Presenter",
    "SplitPosition",
]
