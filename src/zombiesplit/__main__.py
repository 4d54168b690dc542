from __future__ import annotations

import sys

from .config import ConfigManager
from .logs import configure_logging
from .tui.app import ZombiesplitApp


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    config_manager = ConfigManager()
    config = config_manager.load()
    configure_logging(config.logging)
    game = args[0] if args else None
    category = args[1] if len(args) > 1 else None
    ZombiesplitApp(config_manager=config_manager, config=config, game=game, category=category).run()


if __name__ == "__main__":  # pragma: no cover
    main()
