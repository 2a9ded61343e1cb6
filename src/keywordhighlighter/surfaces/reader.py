"""Rendered-surface adapter: wraps keyword matches inside an HTML tree."""

from typing import Iterator, Sequence

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag

from keywordhighlighter.engines.resolver import Annotation, RuleSetResolver
from keywordhighlighter.engines.rules import KeywordRule, TextSnapshot
from keywordhighlighter.engines.styles import HIGHLIGHT_CLASS
from keywordhighlighter.logging_config import get_logger

logger = get_logger(__name__)

# Elements whose text is not rendered prose
SKIPPED_TAGS = {"script", "style", "textarea", "template"}


def is_highlight(node: PageElement) -> bool:
    """True for elements produced by an earlier highlighting pass."""
    return isinstance(node, Tag) and HIGHLIGHT_CLASS in (node.get("class") or [])


def _is_plain_text(node: PageElement) -> bool:
    # Comments, CDATA, doctypes and script/style strings are subclasses
    return type(node) is NavigableString


def _node_text(node: PageElement) -> str:
    return node.get_text() if isinstance(node, Tag) else str(node)


class ReaderHighlighter:
    """Rewrites text nodes of an already rendered tree in place.

    Traversal uses an explicit stack and captures each element's children
    before any of them is replaced, so rewriting a node never disturbs the
    iteration over its siblings.

    Adjacent text nodes and highlight spans are resolved together as one
    run, so fragments left behind by an earlier pass keep their context and
    a second pass finds nothing new to wrap.
    """

    def __init__(
        self,
        rules: Sequence[KeywordRule],
        resolver: RuleSetResolver | None = None,
    ) -> None:
        self.rules: tuple[KeywordRule, ...] = tuple(rules)
        self._resolver = resolver or RuleSetResolver()
        self._factory = BeautifulSoup("", "html.parser")

    def process(self, root: PageElement) -> None:
        """Highlight every keyword below ``root``."""
        if not any(rule.is_active for rule in self.rules):
            return

        wrapped = 0
        stack: list[PageElement] = [root]
        while stack:
            node = stack.pop()
            if isinstance(node, Tag):
                if is_highlight(node) or node.name in SKIPPED_TAGS:
                    continue
                children = list(node.children)
                for run in _text_runs(children):
                    wrapped += self._rewrite_run(run)
                # Reversed so children are visited in document order
                stack.extend(reversed([child for child in children if isinstance(child, Tag)]))
            elif _is_plain_text(node):
                wrapped += self._rewrite_run([node])

        logger.debug("Highlighted rendered tree", highlights=wrapped)

    def _rewrite_run(self, run: list[PageElement]) -> int:
        pieces = [(node, _node_text(node)) for node in run]
        text = "".join(piece for _, piece in pieces)
        if not text.strip():
            return 0

        annotations = self._resolver.process(TextSnapshot(text), self.rules)
        if not annotations:
            return 0

        wrapped = 0
        offset = 0
        for node, piece in pieces:
            end = offset + len(piece)
            if _is_plain_text(node) and node.parent is not None:
                inside = [a for a in annotations if a.start >= offset and a.end <= end]
                if inside:
                    self._rewrite_text(node, piece, offset, inside)
                    wrapped += len(inside)
            offset = end
        return wrapped

    def _rewrite_text(
        self,
        node: NavigableString,
        text: str,
        offset: int,
        annotations: list[Annotation],
    ) -> None:
        replacement: list[PageElement] = []
        last = 0
        for annotation in annotations:
            start, end = annotation.start - offset, annotation.end - offset
            if start > last:
                replacement.append(NavigableString(text[last:start]))
            replacement.append(self._highlight_node(text[start:end], annotation))
            last = end
        if last < len(text):
            replacement.append(NavigableString(text[last:]))

        node.replace_with(*replacement)

    def _highlight_node(self, text: str, annotation: Annotation) -> Tag:
        span = self._factory.new_tag("span")
        span["class"] = list(annotation.style.class_names)
        declarations = annotation.style.css_declarations()
        if declarations:
            span["style"] = declarations
        span.string = text
        return span


def _text_runs(children: list[PageElement]) -> Iterator[list[PageElement]]:
    """Yield runs of adjacent text nodes and highlight spans with some plain text."""
    run: list[PageElement] = []
    for child in children + [None]:
        if child is not None and (_is_plain_text(child) or is_highlight(child)):
            run.append(child)
            continue
        if any(_is_plain_text(node) for node in run):
            yield run
        run = []


def highlight_html(html: str, rules: Sequence[KeywordRule]) -> str:
    """Parse ``html``, highlight keywords and serialize the result."""
    soup = BeautifulSoup(html, "html.parser")
    ReaderHighlighter(rules).process(soup)
    return str(soup)
