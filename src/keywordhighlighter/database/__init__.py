"""Persistence of keyword rules."""

from keywordhighlighter.database.manager import (
    DatabaseManager,
    close_database,
    initialize_database,
)
from keywordhighlighter.database.models import KeywordRuleRecord
from keywordhighlighter.database.store import (
    RuleStore,
    parse_rules_json,
    rule_from_selection,
    rules_from_config,
)

__all__ = [
    "DatabaseManager",
    "initialize_database",
    "close_database",
    "KeywordRuleRecord",
    "RuleStore",
    "parse_rules_json",
    "rule_from_selection",
    "rules_from_config",
]
