"""Terminal rendering of annotations with Rich."""

from functools import lru_cache
from typing import Iterable, Optional, Sequence

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from keywordhighlighter.engines.resolver import Annotation, RuleSetResolver
from keywordhighlighter.engines.rules import FontModifier, KeywordRule, TextSnapshot
from keywordhighlighter.engines.styles import StyleDescriptor
from keywordhighlighter.logging_config import get_logger
from keywordhighlighter.surfaces.editor import Decoration

logger = get_logger(__name__)


def _parse_color(value: Optional[str]) -> Optional[Color]:
    if value is None:
        return None
    try:
        return Color.parse(value)
    except ColorParseError:
        logger.warning("Ignoring unparsable color", color=value)
        return None


@lru_cache(maxsize=256)
def rich_style(descriptor: StyleDescriptor) -> Style:
    """Translate a style descriptor into a Rich style."""
    return Style(
        color=_parse_color(descriptor.color_var),
        bgcolor=_parse_color(descriptor.background_var),
        bold=descriptor.has_modifier(FontModifier.BOLD) or None,
        italic=descriptor.has_modifier(FontModifier.ITALIC) or None,
        underline=descriptor.has_modifier(FontModifier.UNDERLINE) or None,
        strike=descriptor.has_modifier(FontModifier.STRIKETHROUGH) or None,
    )


def stylize_annotations(
    text: Text, annotations: Iterable[Annotation | Decoration], offset: int = 0
) -> Text:
    """Apply annotations to ``text`` whose first character sits at ``offset``."""
    length = len(text.plain)
    for annotation in annotations:
        start = max(annotation.start - offset, 0)
        end = min(annotation.end - offset, length)
        if start < end:
            text.stylize(rich_style(annotation.style), start, end)
    return text


def render_text(
    text: str,
    rules: Sequence[KeywordRule],
    resolver: RuleSetResolver | None = None,
) -> Text:
    """Return ``text`` as a Rich ``Text`` with every keyword highlighted."""
    resolver = resolver or RuleSetResolver()
    annotations = resolver.process(TextSnapshot(text), rules)
    return stylize_annotations(Text(text), annotations)
