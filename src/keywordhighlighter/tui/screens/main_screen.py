"""Main screen: an editable buffer next to its rendered preview."""

from pathlib import Path

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from keywordhighlighter.config import Config
from keywordhighlighter.database.store import RuleStore, rule_from_selection
from keywordhighlighter.engines.rules import KeywordRule
from keywordhighlighter.exceptions import KeywordHighlighterError
from keywordhighlighter.logging_config import get_logger
from keywordhighlighter.surfaces.terminal import stylize_annotations
from keywordhighlighter.tui.widgets.keyword_text_area import KeywordTextArea
from keywordhighlighter.utils.validators import read_text_file

logger = get_logger(__name__)


class MainScreen(Screen):
    """Main screen displaying the editor and the rendered preview."""

    BINDINGS = [
        ("f2", "add_keyword", "Add keyword"),
        ("f5", "reload_rules", "Reload rules"),
    ]

    DEFAULT_CSS = """
    MainScreen {
        background: $surface;
    }

    Horizontal {
        height: 1fr;
    }

    #editor_container {
        width: 1fr;
        border: solid $primary;
    }

    #preview_container {
        width: 1fr;
        border: solid $primary;
    }

    #status_bar {
        height: 1;
        dock: bottom;
        background: $panel;
    }
    """

    def __init__(
        self,
        config: Config,
        store: RuleStore,
        text: str = "",
        text_file: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        """Initialize the main screen."""
        super().__init__(*args, **kwargs)
        self.config = config
        self.store = store
        self._text = text
        self._text_file = text_file
        self._rules: tuple[KeywordRule, ...] = ()
        self.preview_text: Text | None = None

    def compose(self):
        """Compose the screen widgets."""
        yield Header()
        with Horizontal():
            with Vertical(id="editor_container"):
                yield Static("Editor", classes="section_title")
                yield KeywordTextArea(self._text, id="editor", soft_wrap=False)
            with Vertical(id="preview_container"):
                yield Static("Preview", classes="section_title")
                with VerticalScroll():
                    yield Static(id="preview")
        yield Static("Ready", id="status_bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when the screen is mounted."""
        self._load_text()
        self._load_rules()

    def _load_text(self) -> None:
        """Load text from file or use provided text."""
        if self._text_file is None:
            return
        try:
            self._text = read_text_file(self._text_file)
        except KeywordHighlighterError as e:
            self._update_status(f"Error loading file: {e.message}")
            return
        self.query_one("#editor", KeywordTextArea).load_text(self._text)

    def _load_rules(self) -> None:
        try:
            self._rules = self.store.load_rules()
        except KeywordHighlighterError as e:
            logger.error("Failed to load keywords", error=e.message, details=e.details)
            self._update_status(f"Error loading keywords: {e.message}")
            return
        self.query_one("#editor", KeywordTextArea).set_rules(self._rules)
        self._update_status(f"Loaded {len(self._rules)} keywords")

    def on_keyword_text_area_decorations_changed(
        self, message: KeywordTextArea.DecorationsChanged
    ) -> None:
        """Repaint the preview from the editor's latest text."""
        editor = self.query_one("#editor", KeywordTextArea)
        if message.decorations is not editor.decorations:
            return
        self.preview_text = stylize_annotations(
            Text(editor.snapshot.text), message.decorations
        )
        self.query_one("#preview", Static).update(self.preview_text)
        self._update_status(f"{len(message.decorations)} highlights")

    def action_add_keyword(self) -> None:
        """Add the current selection as a new keyword."""
        editor = self.query_one("#editor", KeywordTextArea)
        try:
            rule = rule_from_selection(editor.selected_text, self.config)
            self._rules = self.store.add_rule(rule)
        except KeywordHighlighterError as e:
            self._update_status(e.message)
            return
        editor.set_rules(self._rules)
        self._update_status(f"Added keyword: {rule.pattern}")

    def action_reload_rules(self) -> None:
        self._load_rules()

    def _update_status(self, message: str) -> None:
        """Update the status bar."""
        status_bar = self.query_one("#status_bar", Static)
        status_bar.update(message)
