"""Text area widget that paints keyword highlights while the user edits."""

from typing import TYPE_CHECKING, Optional, Sequence

from rich.text import Text
from textual.message import Message
from textual.widgets import TextArea

from keywordhighlighter.engines.rules import KeywordRule, TextSnapshot
from keywordhighlighter.surfaces.editor import DecorationSet, EditorHighlighter, ViewUpdate
from keywordhighlighter.surfaces.terminal import stylize_annotations

if TYPE_CHECKING:
    from textual.widgets.text_area import Edit, EditResult


class KeywordTextArea(TextArea):
    """Editable buffer backed by an :class:`EditorHighlighter`.

    Highlights are recomputed for the whole document after every edit and
    whenever the view scrolls; each painted line only looks up the
    decorations that intersect it.
    """

    DEFAULT_CSS = """
    KeywordTextArea {
        height: 1fr;
        border: none;
    }
    """

    class DecorationsChanged(Message):
        """Posted after the decoration set has been replaced."""

        def __init__(self, decorations: DecorationSet) -> None:
            super().__init__()
            self.decorations = decorations

    def __init__(
        self,
        text: str = "",
        *,
        rules: Sequence[KeywordRule] = (),
        **kwargs,
    ) -> None:
        self._ready = False
        self.highlighter = EditorHighlighter(rules)
        self._snapshot = TextSnapshot("")
        # The cursor-line background would cover highlights on the edited row
        kwargs.setdefault("highlight_cursor_line", False)
        super().__init__(text, **kwargs)
        self._ready = True

    @property
    def snapshot(self) -> TextSnapshot:
        return self._snapshot

    @property
    def decorations(self) -> DecorationSet:
        return self.highlighter.decorations

    def on_mount(self) -> None:
        self.watch(self, "scroll_y", self._on_scroll_changed, init=False)
        self.refresh_highlights(doc_changed=True)

    def set_rules(self, rules: Sequence[KeywordRule]) -> None:
        """Swap in a new rule snapshot and repaint."""
        self.highlighter.set_rules(rules)
        self.refresh_highlights(doc_changed=True)

    def edit(self, edit: "Edit") -> "EditResult":
        result = super().edit(edit)
        self.refresh_highlights(doc_changed=True)
        return result

    def load_text(self, text: str) -> None:
        super().load_text(text)
        self.refresh_highlights(doc_changed=True)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        # Undo and redo bypass edit()
        if self.text != self._snapshot.text:
            self.refresh_highlights(doc_changed=True)

    def _on_scroll_changed(self) -> None:
        self.refresh_highlights(viewport_changed=True)

    def refresh_highlights(
        self, doc_changed: bool = False, viewport_changed: bool = False
    ) -> None:
        """Recompute decorations synchronously, before the next paint."""
        if not self._ready:
            return

        text = self.text
        if text != self._snapshot.text:
            self._snapshot = TextSnapshot(text, self._snapshot.version + 1)

        updated = self.highlighter.update(
            ViewUpdate(
                self._snapshot,
                doc_changed=doc_changed,
                viewport_changed=viewport_changed,
                viewport=self._visible_range(),
            )
        )
        if updated:
            # Painted lines are cached independently of the decorations
            self._line_cache.clear()
            self.refresh()
            self.post_message(self.DecorationsChanged(self.highlighter.decorations))

    def _visible_range(self) -> Optional[tuple[int, int]]:
        snapshot = self._snapshot
        if not self.is_mounted or snapshot.line_count == 0:
            return None
        last_row = snapshot.line_count - 1
        top = min(int(self.scroll_y), last_row)
        bottom = min(top + max(self.size.height, 1) - 1, last_row)
        return snapshot.line_start(top), snapshot.line_end(bottom)

    def get_line(self, line_index: int) -> Text:
        line = super().get_line(line_index)
        snapshot = self._snapshot
        if line_index >= snapshot.line_count:
            return line
        start = snapshot.line_start(line_index)
        decorations = self.highlighter.decorations.between(
            start, start + len(line.plain)
        )
        return stylize_annotations(line, decorations, offset=start)
