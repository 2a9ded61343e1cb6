"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from keywordhighlighter.config import Config, default_config_path
from keywordhighlighter.exceptions import ConfigurationError


def test_defaults_without_config_file() -> None:
    config = Config.load()

    assert config.logging.level == "WARNING"
    assert config.database.path.endswith("keywords.db")
    assert [k["keyword"] for k in config.highlighter.keywords] == [
        "TODO\\.*",
        "туду\\.*",
        "FIXME",
    ]


def test_default_config_file_is_merged() -> None:
    path = default_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(
        '[logging]\nlevel = "DEBUG"\n\n[highlighter]\ndefault_background_color = "#00FF00"\n',
        encoding="utf-8",
    )

    config = Config.load()

    assert config.logging.level == "DEBUG"
    assert config.logging.json_logging is False
    assert config.highlighter.default_background_color == "#00FF00"


def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Config.load(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "content",
    [
        "not = [valid",
        '[unknown]\nkey = 1\n',
        '[logging]\ncolour = "red"\n',
        '[logging]\nlevel = "LOUD"\n',
        '[logging]\nlevel = 5\n',
        '[logging]\njson_logging = "yes"\n',
        '[highlighter]\nkeywords = [1]\n',
        '[highlighter]\nkeywords = "FIXME"\n',
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.load(path)
