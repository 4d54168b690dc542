from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib


def _default_config_root() -> Path:
    return Path.home() / ".config" / "zombiesplit"


def _default_games_dir() -> Path:
    return _default_config_root() / "games"


def _bool_or_default(value: object, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "1"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "0"}:
        return False
    return default


@dataclass(slots=True)
class GeneralSettings:
    games_dir: Path = field(default_factory=_default_games_dir)
    default_game: str = ""
    default_category: str = ""


@dataclass(slots=True)
class LoggingSettings:
    verbose: bool = False
    json: bool = False
    file: Path | None = None


@dataclass(slots=True)
class ZombiesplitConfig:
    general: GeneralSettings
    logging: LoggingSettings

    @classmethod
    def default(cls) -> "ZombiesplitConfig":
        return cls(general=GeneralSettings(), logging=LoggingSettings())

    def to_dict(self) -> dict:
        return {
            "general": {
                "games_dir": str(self.general.games_dir),
                "default_game": self.general.default_game,
                "default_category": self.general.default_category,
            },
            "logging": {
                "verbose": self.logging.verbose,
                "json": self.logging.json,
                "file": str(self.logging.file) if self.logging.file else "",
            },
        }


class ConfigManager:
    """Simple TOML configuration loader."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or (_default_config_root() / "config.toml")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self._errors: list[str] = []

    def errors(self) -> list[str]:
        return list(self._errors)

    def load(self) -> ZombiesplitConfig:
        self._errors.clear()
        if not self.config_path.exists():
            config = ZombiesplitConfig.default()
            self._write(config)
            return config

        try:
            with self.config_path.open("rb") as handle:
                raw = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            self._errors.append(f"Invalid config file {self.config_path}: {exc}")
            return ZombiesplitConfig.default()

        general_cfg = raw.get("general", {})
        logging_cfg = raw.get("logging", {})
        defaults = ZombiesplitConfig.default()

        games_dir_value = general_cfg.get("games_dir") or str(defaults.general.games_dir)
        if not isinstance(games_dir_value, str):
            self._errors.append(f"Invalid general.games_dir: {games_dir_value!r}")
            games_dir_value = str(defaults.general.games_dir)

        def _string(key: str) -> str:
            value = general_cfg.get(key, "")
            if not isinstance(value, str):
                self._errors.append(f"Invalid general.{key}: {value!r}")
                return ""
            return value.strip()

        return ZombiesplitConfig(
            general=GeneralSettings(
                games_dir=Path(games_dir_value).expanduser(),
                default_game=_string("default_game"),
                default_category=_string("default_category"),
            ),
            logging=LoggingSettings(
                verbose=_bool_or_default(logging_cfg.get("verbose"), defaults.logging.verbose),
                json=_bool_or_default(logging_cfg.get("json"), defaults.logging.json),
                file=self._log_file(logging_cfg.get("file")),
            ),
        )

    def _log_file(self, value: object) -> Path | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            self._errors.append(f"Invalid logging.file: {value!r}")
            return None
        return Path(value).expanduser()

    def _write(self, config: ZombiesplitConfig) -> None:
        data = config.to_dict()
        lines = [
            "[general]",
            f"games_dir = \"{data['general']['games_dir']}\"",
            f"default_game = \"{data['general']['default_game']}\"",
            f"default_category = \"{data['general']['default_category']}\"",
            "",
            "[logging]",
            f"verbose = {str(data['logging']['verbose']).lower()}",
            f"json = {str(data['logging']['json']).lower()}",
            f"file = \"{data['logging']['file']}\"",
        ]
        self.config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def save(self, config: ZombiesplitConfig) -> None:
        self._write(config)
