"""Rule set resolver: merges per-rule matches into non-overlapping annotations."""

from typing import NamedTuple, Sequence

from keywordhighlighter.engines.base import BaseEngine
from keywordhighlighter.engines.matcher import MatchSpan, PatternMatcher
from keywordhighlighter.engines.rules import KeywordRule, TextSnapshot
from keywordhighlighter.engines.styles import StyleDescriptor, StyleResolver
from keywordhighlighter.exceptions import PatternError
from keywordhighlighter.logging_config import get_logger

logger = get_logger(__name__)


class Annotation(NamedTuple):
    """A styled, resolved span of text."""

    start: int
    end: int
    style: StyleDescriptor
    rule_index: int


class RuleSetResolver(BaseEngine):
    """Resolver that gives every character to at most one rule.

    Spans are ordered by start offset, ties going to the rule listed first.
    A left-to-right sweep then keeps a span only if it starts at or after the
    end of the last kept span; overlapping spans are dropped, never trimmed.
    """

    def __init__(
        self,
        matcher: PatternMatcher | None = None,
        style_resolver: StyleResolver | None = None,
    ) -> None:
        self.matcher = matcher or PatternMatcher()
        self.style_resolver = style_resolver or StyleResolver()

    def process(
        self, snapshot: TextSnapshot, rules: Sequence[KeywordRule]
    ) -> list[Annotation]:
        """Compute the annotations for ``snapshot`` under ``rules``."""
        rules = tuple(rules)
        tagged: list[tuple[MatchSpan, int]] = []

        for index, rule in enumerate(rules):
            if not rule.is_active:
                continue
            try:
                spans = self.matcher.process(snapshot, rule)
            except PatternError as e:
                logger.warning(
                    "Skipping rule with invalid regular expression",
                    pattern=e.pattern,
                    rule_index=index,
                    error=e.details,
                )
                continue
            tagged.extend((span, index) for span in spans)

        tagged.sort(key=lambda item: (item[0].start, item[1]))

        annotations: list[Annotation] = []
        last_end = 0
        for span, index in tagged:
            if span.start < last_end:
                continue
            annotations.append(
                Annotation(
                    span.start,
                    span.end,
                    self.style_resolver.resolve(span.rule),
                    index,
                )
            )
            last_end = span.end

        logger.debug(
            "Resolved annotations",
            version=snapshot.version,
            rules=len(rules),
            candidates=len(tagged),
            annotations=len(annotations),
        )
        return annotations

    resolve = process


def highlight_keywords(text: str, rules: Sequence[KeywordRule]) -> list[Annotation]:
    """Convenience function to resolve annotations for plain text."""
    return RuleSetResolver().process(TextSnapshot(text), rules)
