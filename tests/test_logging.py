"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from zombiesplit.config import LoggingSettings
from zombiesplit.logs import configure_logging
from zombiesplit.position import Position
from zombiesplit.presenter.cursor import Cursor
from zombiesplit.presenter.editor import Editor


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("zombiesplit")
    package_level = package_logger.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
    structlog.reset_defaults()


def test_verbose_enables_debug() -> None:
    configure_logging(LoggingSettings(verbose=True))
    assert logging.getLogger("zombiesplit").level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_defaults_set_warning() -> None:
    configure_logging()
    assert logging.getLogger("zombiesplit").level == logging.WARNING
    assert logging.getLogger("textual").level == logging.WARNING


def test_reconfiguring_replaces_handler() -> None:
    root = logging.getLogger()
    before = len(root.handlers)
    configure_logging()
    configure_logging(LoggingSettings(json=True))
    assert len(root.handlers) == before + 1


def test_json_mode_output(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingSettings(verbose=True, json=True))
    structlog.get_logger("zombiesplit.test").warning("json test", answer=42)
    parsed = json.loads(capfd.readouterr().err.strip())
    assert parsed["event"] == "json test"
    assert parsed["answer"] == 42
    assert parsed["level"] == "warning"
    assert parsed["logger"] == "zombiesplit.test"
    assert "timestamp" in parsed


def test_log_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "logs" / "zombiesplit.log"
    configure_logging(LoggingSettings(verbose=True, json=True, file=path))
    structlog.get_logger("zombiesplit.test").debug("to file", split=2)
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert capfd.readouterr().err == ""
    parsed = json.loads(path.read_text(encoding="utf-8").strip())
    assert parsed["event"] == "to file"
    assert parsed["split"] == 2


def test_field_commit_failure_is_logged(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingSettings(json=True))
    editor = Editor(Cursor(0, 0), Position.MINUTES)
    editor.field.add(9)
    editor.field.add(9)
    editor.commit_field()
    lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line.strip()]
    assert [line["event"] for line in lines] == ["field commit failed"]
    assert lines[0]["position"] == "minutes"
    assert lines[0]["text"] == "99"


def test_debug_suppressed_when_not_verbose(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingSettings(json=True))
    structlog.get_logger("zombiesplit.test").debug("quiet")
    assert capfd.readouterr().err == ""
