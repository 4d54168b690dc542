"""structlog setup driven by the ``[logging]`` table of the config file.

The TUI owns the terminal while it runs, so anything written to stderr is
hidden behind the screen. Set ``logging.file`` to keep a readable log.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LoggingSettings

# Third-party loggers that only ever get to speak up for problems.
_QUIET_LOGGERS = ("textual", "asyncio")

_installed: logging.Handler | None = None

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(settings: LoggingSettings, stream_is_tty: bool) -> structlog.types.Processor:
    if settings.json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream_is_tty)


def _handler(settings: LoggingSettings) -> logging.Handler:
    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(settings.file, encoding="utf-8")
        tty = False
    else:
        handler = logging.StreamHandler(sys.stderr)
        tty = sys.stderr.isatty()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings, tty),
            ],
        )
    )
    return handler


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Routes structlog and stdlib logging through one handler.

    ``zombiesplit`` loggers emit debug events when ``settings.verbose`` is set
    and warnings otherwise. Calling this again replaces the previous handler.
    """
    settings = settings or LoggingSettings()

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
        _installed.close()
    _installed = _handler(settings)
    root.addHandler(_installed)
    root.setLevel(logging.WARNING)

    logging.getLogger("zombiesplit").setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
