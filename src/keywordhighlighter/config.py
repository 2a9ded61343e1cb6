"""Configuration loading for the keyword highlighter."""

import copy
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from keywordhighlighter.exceptions import ConfigurationError

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# TOML has no null, so optional values are still strings when present
FIELD_TYPES: dict[str, type] = {
    "logging.level": str,
    "logging.json_logging": bool,
    "logging.log_file": str,
    "database.path": str,
    "highlighter.default_color": str,
    "highlighter.default_background_color": str,
    "highlighter.keywords": list,
}

DEFAULT_KEYWORDS: list[dict[str, Any]] = [
    {
        "keyword": "TODO\\.*",
        "color": "#000000",
        "backgroundColor": "#A9CCE3",
        "fontModifiers": [],
        "showColor": True,
        "showBackgroundColor": True,
        "isRegex": True,
    },
    {
        "keyword": "туду\\.*",
        "color": "#000000",
        "backgroundColor": "#8DE3C2",
        "fontModifiers": [],
        "showColor": True,
        "showBackgroundColor": True,
        "isRegex": True,
    },
    {
        "keyword": "FIXME",
        "color": "#000000",
        "backgroundColor": "#BAA2E8",
        "fontModifiers": [],
        "showColor": True,
        "showBackgroundColor": True,
        "isRegex": False,
    },
]


def default_config_path() -> Path:
    """Return the TOML config location, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "~/.config")
    return Path(xdg).expanduser() / "keyword-highlighter" / "config.toml"


def default_data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME", "~/.local/share")
    return Path(xdg).expanduser() / "keyword-highlighter"


@dataclass
class LoggingConfig:
    """Logging section."""

    level: str = "WARNING"
    json_logging: bool = False
    log_file: str | None = None


@dataclass
class DatabaseConfig:
    """Database section."""

    path: str = field(default_factory=lambda: str(default_data_dir() / "keywords.db"))


@dataclass
class HighlighterConfig:
    """Highlighter section: colors for new rules and the seed rule list."""

    default_color: str = "#000000"
    default_background_color: str = "#FFF59D"
    keywords: list[dict[str, Any]] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_KEYWORDS)
    )


@dataclass
class Config:
    """Top-level configuration object."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    highlighter: HighlighterConfig = field(default_factory=HighlighterConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from TOML, falling back to defaults.

        An explicitly given path must exist; the default location is optional.
        """
        config = cls()
        config_path = Path(path).expanduser() if path is not None else default_config_path()

        if not config_path.exists():
            if path is not None:
                raise ConfigurationError(f"Config file not found: {config_path}")
            return config

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Invalid TOML in {config_path}", details=str(e)
            ) from e

        config.apply(data)
        return config

    def apply(self, data: dict[str, Any]) -> None:
        """Merge a parsed mapping over the current values."""
        sections = {
            "logging": self.logging,
            "database": self.database,
            "highlighter": self.highlighter,
        }
        for name, values in data.items():
            section = sections.get(name)
            if section is None:
                raise ConfigurationError(f"Unknown config section: [{name}]")
            if not isinstance(values, dict):
                raise ConfigurationError(f"Config section [{name}] must be a table")
            for key, value in values.items():
                expected = FIELD_TYPES.get(f"{name}.{key}")
                if expected is None:
                    raise ConfigurationError(f"Unknown config key: {name}.{key}")
                if not isinstance(value, expected):
                    raise ConfigurationError(
                        f"Config key {name}.{key} must be a {expected.__name__}, "
                        f"got {type(value).__name__}"
                    )
                setattr(section, key, value)
        self.validate()

    def validate(self) -> None:
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.logging.level}")
        keywords = self.highlighter.keywords
        if not isinstance(keywords, list) or not all(isinstance(item, dict) for item in keywords):
            raise ConfigurationError("highlighter.keywords must be an array of tables")
