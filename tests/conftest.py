"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Generator

import pytest

from keywordhighlighter.config import Config
from keywordhighlighter.database import RuleStore, close_database, initialize_database
from keywordhighlighter.engines.rules import FontModifier, KeywordRule


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config and data lookups inside the test's temp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


@pytest.fixture
def temp_db(tmp_path: Path) -> Path:
    """Path for a temporary database."""
    return tmp_path / "keywords.db"


@pytest.fixture
def config(temp_db: Path) -> Config:
    """Create a test configuration."""
    config = Config.load()
    config.database.path = str(temp_db)
    return config


@pytest.fixture
def store(config: Config) -> Generator[RuleStore, None, None]:
    """Initialize the database and return an empty rule store."""
    initialize_database(config)
    yield RuleStore()
    close_database()


@pytest.fixture
def todo_rule() -> KeywordRule:
    return KeywordRule(
        pattern="TODO\\.*",
        is_regex=True,
        color="#000000",
        background_color="#A9CCE3",
    )


@pytest.fixture
def fixme_rule() -> KeywordRule:
    return KeywordRule(
        pattern="FIXME",
        color="#000000",
        background_color="#BAA2E8",
        font_modifiers=frozenset({FontModifier.BOLD}),
    )


@pytest.fixture
def sample_rules(todo_rule: KeywordRule, fixme_rule: KeywordRule) -> list[KeywordRule]:
    return [todo_rule, fixme_rule]


@pytest.fixture
def sample_text() -> str:
    """Sample text for testing."""
    return "TODO.fix this FIXME later"
