"""Editable-surface adapter: annotations as decoration sets for a text buffer."""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from itertools import count
from typing import Iterator, NamedTuple, Optional, Sequence

from keywordhighlighter.engines.resolver import RuleSetResolver
from keywordhighlighter.engines.rules import KeywordRule, TextSnapshot
from keywordhighlighter.engines.styles import StyleDescriptor
from keywordhighlighter.logging_config import get_logger

logger = get_logger(__name__)


class Decoration(NamedTuple):
    """A styled range in buffer coordinates."""

    start: int
    end: int
    style: StyleDescriptor


class DecorationSet:
    """Immutable, ascending, non-overlapping decorations for one snapshot."""

    __slots__ = ("_decorations", "_starts", "_ends", "version", "generation")

    def __init__(
        self,
        decorations: Sequence[Decoration] = (),
        version: int = 0,
        generation: int = 0,
    ) -> None:
        self._decorations = tuple(decorations)
        self._starts = [d.start for d in self._decorations]
        self._ends = [d.end for d in self._decorations]
        self.version = version
        self.generation = generation

    def __len__(self) -> int:
        return len(self._decorations)

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self._decorations)

    def __getitem__(self, index: int) -> Decoration:
        return self._decorations[index]

    def between(self, start: int, end: int) -> tuple[Decoration, ...]:
        """Return decorations intersecting ``[start, end)``."""
        # Ends ascend as well, because decorations never overlap
        first = bisect_right(self._ends, start)
        last = bisect_left(self._starts, end)
        return self._decorations[first:last]


EMPTY_DECORATIONS = DecorationSet()


@dataclass(frozen=True)
class ViewUpdate:
    """What changed in the buffer since the last update."""

    snapshot: TextSnapshot
    doc_changed: bool = False
    viewport_changed: bool = False
    viewport: Optional[tuple[int, int]] = None


class EditorHighlighter:
    """Keeps the decoration set of one mutable buffer current.

    Every recomputation covers the whole document; consumers paint only the
    decorations inside the visible range. Results are swapped in wholesale
    and a result older than the one already held is discarded.
    """

    def __init__(
        self,
        rules: Sequence[KeywordRule] = (),
        resolver: RuleSetResolver | None = None,
    ) -> None:
        self._rules: tuple[KeywordRule, ...] = tuple(rules)
        self._resolver = resolver or RuleSetResolver()
        self._generations = count(1)
        self.decorations: DecorationSet = EMPTY_DECORATIONS
        self.viewport: Optional[tuple[int, int]] = None

    @property
    def rules(self) -> tuple[KeywordRule, ...]:
        return self._rules

    def set_rules(self, rules: Sequence[KeywordRule]) -> None:
        """Replace the rule snapshot used by subsequent computations."""
        self._rules = tuple(rules)

    def build(self, snapshot: TextSnapshot) -> DecorationSet:
        """Compute a fresh decoration set for ``snapshot``."""
        generation = next(self._generations)
        annotations = self._resolver.process(snapshot, self._rules)
        return DecorationSet(
            [Decoration(a.start, a.end, a.style) for a in annotations],
            version=snapshot.version,
            generation=generation,
        )

    def commit(self, decorations: DecorationSet) -> bool:
        """Install ``decorations`` unless a newer result is already held."""
        if decorations.generation < self.decorations.generation:
            logger.debug(
                "Discarding stale decorations",
                generation=decorations.generation,
                current=self.decorations.generation,
            )
            return False
        self.decorations = decorations
        return True

    def refresh(self, snapshot: TextSnapshot) -> DecorationSet:
        """Recompute for ``snapshot`` and install the result."""
        self.commit(self.build(snapshot))
        return self.decorations

    def update(self, update: ViewUpdate) -> bool:
        """Handle a buffer update; return True if decorations were rebuilt."""
        if update.viewport is not None:
            self.viewport = update.viewport
        if not (update.doc_changed or update.viewport_changed):
            return False
        self.refresh(update.snapshot)
        return True

    def visible(self) -> tuple[Decoration, ...]:
        """Decorations inside the last reported viewport, or all of them."""
        if self.viewport is None:
            return tuple(self.decorations)
        return self.decorations.between(*self.viewport)
