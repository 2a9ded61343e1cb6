"""Core engines for keyword matching and span resolution."""

from keywordhighlighter.engines.matcher import MatchSpan, PatternMatcher
from keywordhighlighter.engines.resolver import (
    Annotation,
    RuleSetResolver,
    highlight_keywords,
)
from keywordhighlighter.engines.rules import FontModifier, KeywordRule, TextSnapshot
from keywordhighlighter.engines.styles import StyleDescriptor, StyleResolver, resolve_style

__all__ = [
    "Annotation",
    "FontModifier",
    "KeywordRule",
    "MatchSpan",
    "PatternMatcher",
    "RuleSetResolver",
    "StyleDescriptor",
    "StyleResolver",
    "TextSnapshot",
    "highlight_keywords",
    "resolve_style",
]
