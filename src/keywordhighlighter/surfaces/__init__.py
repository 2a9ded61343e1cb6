"""Adapters that paint resolved annotations onto concrete surfaces."""

from keywordhighlighter.surfaces.editor import (
    Decoration,
    DecorationSet,
    EditorHighlighter,
    ViewUpdate,
)
from keywordhighlighter.surfaces.reader import (
    ReaderHighlighter,
    highlight_html,
)
from keywordhighlighter.surfaces.terminal import render_text, rich_style

__all__ = [
    "Decoration",
    "DecorationSet",
    "EditorHighlighter",
    "ReaderHighlighter",
    "ViewUpdate",
    "highlight_html",
    "render_text",
    "rich_style",
]
