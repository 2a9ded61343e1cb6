"""Pattern matcher: finds the spans a single keyword rule covers."""

import re
from functools import lru_cache
from typing import NamedTuple

from keywordhighlighter.engines.base import BaseEngine
from keywordhighlighter.engines.rules import KeywordRule, TextSnapshot
from keywordhighlighter.exceptions import PatternError
from keywordhighlighter.utils.text_processor import iter_word_tokens


class MatchSpan(NamedTuple):
    """A half-open ``[start, end)`` range matched by one rule."""

    start: int
    end: int
    rule: KeywordRule


class PatternMatcher(BaseEngine):
    """Matches one rule against a text snapshot.

    Literal rules match whole words case-insensitively. Regex rules are
    wrapped as ``\\b(pattern)\\b`` and only capture group 1 is highlighted,
    so a pattern may carry context around the part that gets painted.
    """

    def process(self, snapshot: TextSnapshot, rule: KeywordRule) -> list[MatchSpan]:
        """Return the rule's spans in ascending order, never overlapping.

        Raises:
            PatternError: If a regex rule does not compile.
        """
        if not rule.is_active:
            return []
        if rule.is_regex:
            return self._match_regex(snapshot.text, rule)
        return self._match_literal(snapshot.text, rule)

    match = process

    def _match_regex(self, text: str, rule: KeywordRule) -> list[MatchSpan]:
        regex = compile_pattern(rule.pattern)
        spans: list[MatchSpan] = []
        # finditer steps past empty matches, so the scan always terminates
        for match in regex.finditer(text):
            start, end = match.span(1)
            if start == end:
                continue
            spans.append(MatchSpan(start, end, rule))
        return spans

    def _match_literal(self, text: str, rule: KeywordRule) -> list[MatchSpan]:
        needle = rule.pattern.strip().casefold()
        return [
            MatchSpan(start, end, rule)
            for word, start, end in iter_word_tokens(text)
            if word.casefold() == needle
        ]


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` with word boundaries.

    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(rf"\b({pattern})\b", re.IGNORECASE)
    except (re.error, RecursionError, OverflowError) as e:
        raise PatternError(pattern, details=str(e)) from e
