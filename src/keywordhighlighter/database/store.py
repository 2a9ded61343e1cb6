"""Rule store: the settings collaborator that owns the keyword rule list."""

import json
from typing import Any, Iterable, Sequence

from peewee import PeeweeException

from keywordhighlighter.config import Config
from keywordhighlighter.database.models import KeywordRuleRecord, db_proxy
from keywordhighlighter.engines.rules import KeywordRule
from keywordhighlighter.exceptions import DatabaseError, ValidationError
from keywordhighlighter.logging_config import get_logger
from keywordhighlighter.utils.text_processor import clean_selection

logger = get_logger(__name__)

REQUIRED_STRING_FIELDS = ("keyword", "color", "backgroundColor")


class RuleStore:
    """Persists the ordered rule list and hands out immutable snapshots.

    Engines never see this object; they receive the tuple returned by
    :meth:`load_rules`.
    """

    def load_rules(self) -> tuple[KeywordRule, ...]:
        """Return the active rules in priority order."""
        try:
            records = KeywordRuleRecord.select().order_by(
                KeywordRuleRecord.position, KeywordRuleRecord.id
            )
            rules = tuple(record.to_rule() for record in records)
        except PeeweeException as e:
            raise DatabaseError("Failed to load keyword rules", details=str(e)) from e
        return tuple(rule for rule in rules if rule.is_active)

    def save_rules(self, rules: Iterable[KeywordRule]) -> tuple[KeywordRule, ...]:
        """Replace the stored list, dropping rules with blank patterns."""
        kept = tuple(rule for rule in rules if rule.is_active)
        try:
            with db_proxy.atomic():
                KeywordRuleRecord.delete().execute()
                for position, rule in enumerate(kept):
                    KeywordRuleRecord.create(**KeywordRuleRecord.fields_for(rule, position))
        except PeeweeException as e:
            raise DatabaseError("Failed to save keyword rules", details=str(e)) from e
        logger.info("Saved keyword rules", count=len(kept))
        return kept

    def add_rule(self, rule: KeywordRule) -> tuple[KeywordRule, ...]:
        """Append ``rule`` with the lowest priority."""
        return self.save_rules((*self.load_rules(), rule))

    def remove_rule(self, index: int) -> tuple[KeywordRule, ...]:
        rules = list(self.load_rules())
        if not 0 <= index < len(rules):
            raise ValidationError(f"No keyword rule at index {index}")
        del rules[index]
        return self.save_rules(rules)

    def seed_defaults(self, rules: Sequence[KeywordRule]) -> tuple[KeywordRule, ...]:
        """Store ``rules`` if nothing has been stored yet."""
        try:
            seeded = KeywordRuleRecord.select().exists()
        except PeeweeException as e:
            raise DatabaseError("Failed to inspect keyword rules", details=str(e)) from e
        if seeded:
            return self.load_rules()
        return self.save_rules(rules)

    def export_json(self) -> str:
        """Serialize the rule list in the persisted layout."""
        return json.dumps(
            [rule.to_dict() for rule in self.load_rules()], indent=2, ensure_ascii=False
        )

    def import_json(self, payload: str) -> tuple[KeywordRule, ...]:
        """Replace the rule list with rules parsed from ``payload``."""
        return self.save_rules(parse_rules_json(payload))


def parse_rules_json(payload: str) -> list[KeywordRule]:
    """Parse and validate an exported rule list."""
    if not payload.strip():
        raise ValidationError("Please paste valid JSON data.")
    try:
        data: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ValidationError("Invalid JSON", details=str(e)) from e

    if not isinstance(data, list):
        raise ValidationError("Invalid format: Expected an array of keyword styles.")

    rules = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not all(
            isinstance(item.get(name), str) for name in REQUIRED_STRING_FIELDS
        ):
            raise ValidationError(f"Invalid keyword style at index {index}.")
        rules.append(KeywordRule.from_dict(item))
    return rules


def rules_from_config(config: Config) -> list[KeywordRule]:
    return [KeywordRule.from_dict(item) for item in config.highlighter.keywords]


def rule_from_selection(selection: str, config: Config) -> KeywordRule:
    """Build a literal rule from an editor selection.

    Raises:
        ValidationError: If nothing usable is selected.
    """
    keyword = clean_selection(selection)
    if not keyword.strip():
        raise ValidationError("Select some text to add it as a keyword.")
    return KeywordRule(
        pattern=keyword,
        color=config.highlighter.default_color,
        background_color=config.highlighter.default_background_color,
    )
