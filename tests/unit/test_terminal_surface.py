"""Unit tests for Rich rendering of annotations."""

from rich.color import Color
from rich.style import Style

from keywordhighlighter.engines.rules import FontModifier, KeywordRule
from keywordhighlighter.engines.styles import resolve_style
from keywordhighlighter.surfaces.terminal import render_text, rich_style


def test_rich_style_maps_colors_and_modifiers() -> None:
    rule = KeywordRule(
        pattern="x",
        color="#000000",
        background_color="#A9CCE3",
        font_modifiers=frozenset({FontModifier.ITALIC, FontModifier.UNDERLINE}),
    )

    style = rich_style(resolve_style(rule))

    assert style.color == Color.parse("#000000")
    assert style.bgcolor == Color.parse("#A9CCE3")
    assert style.italic is True
    assert style.underline is True
    assert style.bold is None


def test_rich_style_skips_hidden_and_invalid_colors() -> None:
    rule = KeywordRule(pattern="x", color="not-a-color", show_background_color=False)

    style = rich_style(resolve_style(rule))

    assert style == Style()


def test_render_text_stylizes_matches(sample_rules: list[KeywordRule], sample_text: str) -> None:
    text = render_text(sample_text, sample_rules)

    assert text.plain == sample_text
    assert [(span.start, span.end) for span in text.spans] == [(0, 5), (14, 19)]
