"""TUI widgets for the keyword highlighter."""

from keywordhighlighter.tui.widgets.keyword_text_area import KeywordTextArea

__all__ = ["KeywordTextArea"]
