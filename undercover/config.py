"""Game configuration loaded from YAML."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .engine.rules import MAX_PLAYERS, MIN_PLAYERS, max_infiltrators
from .engine.words import WORD_PAIRS, WordPair, validate_word_pairs

DEFAULT_CONFIG_PATH = "config/game.yaml"


class ConfigError(ValueError):
    """A config file that cannot be read as game settings."""


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Config section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


class GameSettings(BaseModel):
    """Default table setup and logging options."""

    player_count: int = Field(5, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    num_undercover: int = Field(1, ge=0)
    num_mr_white: int = Field(1, ge=0)
    player_names: list[str] = Field(default_factory=list)
    log_dir: Optional[str] = "games"
    extra_word_pairs: list[list[str]] = Field(default_factory=list)

    @field_validator("extra_word_pairs")
    @classmethod
    def check_word_pairs(cls, pairs: list[list[str]]) -> list[list[str]]:
        return [list(pair) for pair in validate_word_pairs(pairs)]

    @model_validator(mode="after")
    def check_factions(self) -> "GameSettings":
        infiltrators = self.num_undercover + self.num_mr_white
        limit = max_infiltrators(self.player_count)
        if infiltrators < 1:
            raise ValueError("At least one Undercover or Mr. White is required")
        if infiltrators > limit:
            raise ValueError(
                f"{infiltrators} infiltrators is too many for "
                f"{self.player_count} players (max {limit})"
            )
        if len(self.player_names) > self.player_count:
            raise ValueError(
                f"{len(self.player_names)} names given for {self.player_count} players"
            )
        return self

    @classmethod
    def from_yaml_dict(cls, data: Optional[dict]) -> "GameSettings":
        """Build settings from the sections of a game.yaml file."""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        game = _section(data, "game")
        roles = _section(data, "roles")
        logging = _section(data, "logging")

        values: dict = {}
        if "player_count" in game:
            values["player_count"] = game["player_count"]
        if "undercover" in roles:
            values["num_undercover"] = roles["undercover"]
        if "mrwhite" in roles:
            values["num_mr_white"] = roles["mrwhite"]
        if data.get("players"):
            values["player_names"] = data["players"]
        if "dir" in logging:
            values["log_dir"] = logging["dir"]
        if data.get("word_pairs"):
            values["extra_word_pairs"] = data["word_pairs"]
        return cls(**values)

    def word_pairs(self) -> tuple[WordPair, ...]:
        """Bundled pairs plus any configured extras."""
        extras = tuple((first, second) for first, second in self.extra_word_pairs)
        return WORD_PAIRS + extras

    def seat_names(self) -> list[str]:
        """Configured names padded with blanks up to the player count."""
        names = list(self.player_names)
        names.extend([""] * (self.player_count - len(names)))
        return names


def load_settings(config_path: Optional[str] = None) -> GameSettings:
    """Load settings from a YAML file.

    The path comes from the argument, then UNDERCOVER_CONFIG, then the
    default location. A missing file gives the built-in defaults.
    UNDERCOVER_LOG_DIR overrides the log directory ("none" disables logs).
    """
    path = Path(config_path or os.getenv("UNDERCOVER_CONFIG") or DEFAULT_CONFIG_PATH)

    data: Optional[dict] = None
    if path.exists():
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse {path}: {e}") from e

    settings = GameSettings.from_yaml_dict(data)

    log_dir = os.getenv("UNDERCOVER_LOG_DIR")
    if log_dir is not None:
        settings = settings.model_copy(
            update={"log_dir": None if log_dir.lower() in ("", "none") else log_dir}
        )
    return settings
