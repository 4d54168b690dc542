"""Game files: the splits of a game and the categories that run through them.

A game file is TOML::

    name = "Sonic CD"

    [splits.pp1]
    name = "Palmtree Panic 1"
    comparison = "1m2s300"

    [categories.btg]
    name = "Beat the Game"
    splits = ["pp1", "pp2"]

Comparison times use the compact time format and are optional.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib

from .errors import TimeError
from .models import Run, Split
from .timing import Time


class GameParseError(RuntimeError):
    pass


@dataclass(slots=True)
class SplitConfig:
    short: str
    name: str
    comparison: Time | None = None


@dataclass(slots=True)
class CategoryConfig:
    short: str
    name: str
    splits: list[str] = field(default_factory=list)


@dataclass(slots=True)
class GameConfig:
    short: str
    name: str
    splits: dict[str, SplitConfig] = field(default_factory=dict)
    categories: dict[str, CategoryConfig] = field(default_factory=dict)

    @classmethod
    def from_toml(cls, raw: str, *, default_name: str) -> "GameConfig":
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise GameParseError(f"Game '{default_name}' is not valid TOML: {exc}") from exc
        splits = {
            short: cls._parse_split(short, value)
            for short, value in data.get("splits", {}).items()
        }
        categories: dict[str, CategoryConfig] = {}
        for short, value in data.get("categories", {}).items():
            split_names = list(value.get("splits", []))
            missing = [name for name in split_names if name not in splits]
            if missing:
                raise GameParseError(
                    f"Category '{short}' refers to unknown splits: {', '.join(missing)}"
                )
            categories[short] = CategoryConfig(
                short=short,
                name=value.get("name", short),
                splits=split_names,
            )
        return cls(
            short=default_name,
            name=data.get("name", default_name),
            splits=splits,
            categories=categories,
        )

    @staticmethod
    def _parse_split(short: str, data: dict) -> SplitConfig:
        raw_comparison = data.get("comparison")
        comparison: Time | None = None
        if raw_comparison:
            try:
                comparison = Time.parse(str(raw_comparison))
            except TimeError as exc:
                raise GameParseError(f"Split '{short}' has a bad comparison time: {exc}") from exc
        return SplitConfig(short=short, name=data.get("name", short), comparison=comparison)

    def to_run(self, category: str) -> Run:
        config = self.categories.get(category)
        if config is None:
            raise GameParseError(f"Game '{self.short}' has no category '{category}'")
        splits = [
            Split(
                short=short,
                name=self.splits[short].name,
                comparison=self.splits[short].comparison,
            )
            for short in config.splits
        ]
        return Run(game=self.name, category=config.name, splits=splits)


@dataclass(slots=True)
class GameLoadError:
    path: Path | None
    message: str


@dataclass
class GameRepository:
    directory: Path | None = None

    def __post_init__(self) -> None:
        self._games: dict[str, GameConfig] = {}
        self._errors: list[GameLoadError] = []
        self.reload()

    def reload(self) -> None:
        self._games.clear()
        self._errors.clear()
        if not self.directory:
            return
        self.directory.mkdir(parents=True, exist_ok=True)
        for file in sorted(self.directory.glob("*.toml")):
            try:
                game = GameConfig.from_toml(file.read_text(encoding="utf-8"), default_name=file.stem)
            except GameParseError as exc:
                self._errors.append(GameLoadError(path=file, message=str(exc)))
                continue
            self._games[game.short] = game

    def game_names(self) -> list[str]:
        return sorted(self._games.keys())

    def get(self, name: str) -> GameConfig:
        game = self._games.get(name)
        if not game:
            raise KeyError(f"Game '{name}' not found")
        return game

    def errors(self) -> list[GameLoadError]:
        return list(self._errors)
