"""Textual application hosting the keyword highlighter."""

from pathlib import Path

from textual.app import App

from keywordhighlighter.config import Config
from keywordhighlighter.database.store import RuleStore
from keywordhighlighter.tui.screens.main_screen import MainScreen


class KeywordHighlighterApp(App):
    """Editor with live keyword highlighting."""

    TITLE = "Keyword Highlighter"

    def __init__(
        self,
        config: Config,
        store: RuleStore,
        text: str = "",
        text_file: Path | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.store = store
        self._text = text
        self._text_file = text_file

    def on_mount(self) -> None:
        self.push_screen(
            MainScreen(self.config, self.store, text=self._text, text_file=self._text_file)
        )
