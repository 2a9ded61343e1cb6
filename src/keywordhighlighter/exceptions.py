"""Custom exception hierarchy for the keyword highlighter."""

from typing import Optional


class KeywordHighlighterError(Exception):
    """Base exception for all keyword highlighter errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class PatternError(KeywordHighlighterError):
    """A keyword rule's regular expression could not be compiled."""

    def __init__(self, pattern: str, details: Optional[str] = None) -> None:
        super().__init__(f"Invalid regular expression: {pattern!r}", details)
        self.pattern = pattern


class DatabaseError(KeywordHighlighterError):
    """Error in database operations."""

    pass


class ConfigurationError(KeywordHighlighterError):
    """Error in configuration loading or validation."""

    pass


class ValidationError(KeywordHighlighterError):
    """Error in input validation."""

    pass
