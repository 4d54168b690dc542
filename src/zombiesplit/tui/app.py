from __future__ import annotations

from textual.app import App, ComposeResult  # type: ignore[import]
from textual.binding import Binding  # type: ignore[import]
from textual.containers import Vertical  # type: ignore[import]
from textual.widgets import DataTable, Footer, Header, Static  # type: ignore[import]

from ..config import ConfigManager, ZombiesplitConfig
from ..games import GameParseError, GameRepository
from ..models import Pace, Run
from ..position import Position
from ..presenter import Editor, Presenter, SplitPosition
from .keys import DIGIT_KEYS, KEYMAP, event_for_key

PACE_STYLES = {
    Pace.PERSONAL_BEST: "bold yellow",
    Pace.AHEAD: "green",
    Pace.BEHIND: "red",
    Pace.INCONCLUSIVE: "",
}

SPLIT_POSITION_STYLES = {
    SplitPosition.DONE: "dim",
    SplitPosition.CURSOR: "bold",
    SplitPosition.COMING: "",
}


def _styled(text: str, style: str) -> str:
    if not style or not text:
        return text
    return f"[{style}]{text}[/{style}]"


def editor_text(editor: Editor | None) -> str:
    """Renders the time being edited, with the open field shown as its digit buffer."""
    if editor is None:
        return ""
    parts: list[str] = []
    for position in Position:
        if editor.field is not None and editor.field.position is position:
            text = f"[reverse]{editor.field}[/reverse]"
        else:
            text = editor.time.field_at(position).padded()
        parts.append(text + (position.delimiter or ""))
    return "".join(parts)


def split_row(presenter: Presenter, index: int) -> tuple[str, str, str, str]:
    run = presenter.run
    split = run.splits[index]
    name = _styled(split.name, SPLIT_POSITION_STYLES[presenter.split_position(index)])
    if split.has_times:
        time_text = _styled(str(split.total), PACE_STYLES[run.pace_at(index)])
        total_text = str(run.total_at(index))
    else:
        time_text = total_text = "--"
    comparison = str(split.comparison) if split.comparison is not None else ""
    return name, time_text, total_text, comparison


def load_run(config: ZombiesplitConfig, game: str | None = None, category: str | None = None) -> Run:
    """Builds a run from the configured games directory.

    Raises ``KeyError`` for unknown games and ``GameParseError`` for bad
    categories.
    """
    repository = GameRepository(config.general.games_dir)
    game_name = game or config.general.default_game
    if not game_name:
        names = repository.game_names()
        if not names:
            raise KeyError(f"No games found in {config.general.games_dir}")
        game_name = names[0]
    game_config = repository.get(game_name)
    category_name = category or config.general.default_category
    if not category_name:
        if not game_config.categories:
            raise GameParseError(f"Game '{game_name}' has no categories")
        category_name = next(iter(game_config.categories))
    return game_config.to_run(category_name)


class SplitTable(DataTable):
    # Keys go to the app's bindings, not to the table.
    can_focus = False

    def __init__(self) -> None:
        super().__init__(zebra_stripes=True, id="split-table")
        self.cursor_type = "row"

    def show_run(self, presenter: Presenter) -> None:
        self.clear()
        for index in range(len(presenter.run)):
            self.add_row(*split_row(presenter, index))
        cursor = presenter.cursor
        self.show_cursor = cursor is not None
        if cursor is not None and self.row_count:
            self.cursor_coordinate = (min(cursor.position, self.row_count - 1), 0)


class EditorLine(Static):
    def show(self, editor: Editor | None) -> None:
        self.update(editor_text(editor))


class ZombiesplitApp(App):
    CSS = """
    Screen {
        background: $surface;
    }

    .panel {
        border: round $accent;
        padding: 1 2;
        background: $boost;
        layout: vertical;
    }

    .panel-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    #split-table {
        height: 1fr;
    }

    #editor-line {
        height: 1;
        margin-top: 1;
    }
    """
    TITLE = "zombiesplit"

    BINDINGS = [
        Binding(key, f"send({key!r})", description, show=show)
        for key, _, description, show in KEYMAP
    ] + [Binding(key, f"send({key!r})", "Digit", show=False) for key in DIGIT_KEYS]

    def __init__(
        self,
        run: Run | None = None,
        *,
        config_manager: ConfigManager | None = None,
        config: ZombiesplitConfig | None = None,
        game: str | None = None,
        category: str | None = None,
    ) -> None:
        super().__init__()
        self.config_manager = config_manager or ConfigManager()
        self.config = config or self.config_manager.load()
        self._startup_errors: list[str] = self.config_manager.errors()
        if run is None:
            try:
                run = load_run(self.config, game, category)
            except (KeyError, GameParseError) as exc:
                self._startup_errors.append(str(exc).strip("'\""))
                run = Run(game="", category="")
        self.presenter = Presenter(run)
        self.split_table: SplitTable | None = None
        self.editor_line: EditorLine | None = None
        self.run_header: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self.split_table = SplitTable()
        self.editor_line = EditorLine(id="editor-line")
        self.run_header = Static(self._header_text(), classes="panel-title")
        yield Vertical(self.run_header, self.split_table, self.editor_line, id="run-panel", classes="panel")
        yield Footer()

    def on_mount(self) -> None:
        if self.split_table is not None:
            self.split_table.add_columns("Split", "Time", "Total", "Comparison")
        self.refresh_run()
        for message in self._startup_errors:
            self.notify(message, severity="error")

    def action_send(self, key: str) -> None:
        event = event_for_key(key)
        if event is None:
            return
        editor = self.presenter.editor
        previous_error = editor.error if editor is not None else None
        self.presenter.handle_event(event)
        if editor is not None and editor.error is not None and editor.error is not previous_error:
            self.notify(str(editor.error), severity="warning")
        if not self.presenter.is_running:
            self.exit()
            return
        self.refresh_run()

    def refresh_run(self) -> None:
        if self.run_header is not None:
            self.run_header.update(self._header_text())
        if self.split_table is not None:
            self.split_table.show_run(self.presenter)
        if self.editor_line is not None:
            self.editor_line.show(self.presenter.editor)

    def _header_text(self) -> str:
        run = self.presenter.run
        if not run.game:
            return "No run loaded"
        return f"{run.game} • {run.category} • attempt {run.attempt}"
