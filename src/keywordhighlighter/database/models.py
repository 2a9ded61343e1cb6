"""Database models for keyword rules using Peewee ORM."""

from datetime import datetime

from peewee import (
    BooleanField,
    CharField,
    DatabaseProxy,
    DateTimeField,
    IntegerField,
    Model,
    TextField,
)

from keywordhighlighter.engines.rules import KeywordRule
from keywordhighlighter.exceptions import DatabaseError

# Database proxy that will be initialized by manager
db_proxy = DatabaseProxy()


class BaseModel(Model):
    """Base model with common fields."""

    class Meta:
        database = db_proxy


class KeywordRuleRecord(BaseModel):
    """A persisted keyword rule; ``position`` is its priority in the list."""

    position = IntegerField(index=True)
    keyword = TextField()
    is_regex = BooleanField(default=False)
    color = CharField(max_length=64)
    background_color = CharField(max_length=64)
    show_color = BooleanField(default=True)
    show_background_color = BooleanField(default=True)
    font_modifiers = CharField(max_length=255, default="")  # Comma separated
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "keyword_rules"

    def to_rule(self) -> KeywordRule:
        return KeywordRule.from_dict(
            {
                "keyword": self.keyword,
                "isRegex": self.is_regex,
                "color": self.color,
                "backgroundColor": self.background_color,
                "showColor": self.show_color,
                "showBackgroundColor": self.show_background_color,
                "fontModifiers": [m for m in self.font_modifiers.split(",") if m],
            }
        )

    @classmethod
    def fields_for(cls, rule: KeywordRule, position: int) -> dict:
        return {
            "position": position,
            "keyword": rule.pattern,
            "is_regex": rule.is_regex,
            "color": rule.color,
            "background_color": rule.background_color,
            "show_color": rule.show_color,
            "show_background_color": rule.show_background_color,
            "font_modifiers": ",".join(rule.to_dict()["fontModifiers"]),
        }


def create_tables() -> None:
    """Create all database tables."""
    if db_proxy.obj is None:
        raise DatabaseError("Database not initialized")
    db_proxy.create_tables([KeywordRuleRecord], safe=True)

