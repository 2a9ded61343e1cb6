"""Keyword rules and text snapshots consumed by the engines."""

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any

from keywordhighlighter.logging_config import get_logger

logger = get_logger(__name__)


class FontModifier(str, Enum):
    """Font modifiers a rule may request."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True)
class KeywordRule:
    """A keyword to highlight and how to style it."""

    pattern: str
    is_regex: bool = False
    color: str = "#000000"
    background_color: str = "#FFF59D"
    show_color: bool = True
    show_background_color: bool = True
    font_modifiers: frozenset[FontModifier] = field(default_factory=frozenset)

    @property
    def is_active(self) -> bool:
        """Rules with an empty or whitespace-only pattern never match."""
        return bool(self.pattern and self.pattern.strip())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeywordRule":
        """Build a rule from the persisted camelCase layout.

        Records written before the visibility flags existed default to visible.
        """
        modifiers = set()
        for name in data.get("fontModifiers") or []:
            try:
                modifiers.add(FontModifier(str(name).lower()))
            except ValueError:
                logger.warning("Ignoring unknown font modifier", modifier=name)

        show_color = data.get("showColor")
        show_background_color = data.get("showBackgroundColor")
        return cls(
            pattern=str(data.get("keyword") or ""),
            is_regex=bool(data.get("isRegex", False)),
            color=str(data.get("color") or "#000000"),
            background_color=str(data.get("backgroundColor") or "#FFF59D"),
            show_color=True if show_color is None else bool(show_color),
            show_background_color=(
                True if show_background_color is None else bool(show_background_color)
            ),
            font_modifiers=frozenset(modifiers),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.pattern,
            "color": self.color,
            "backgroundColor": self.background_color,
            "fontModifiers": [m.value for m in FontModifier if m in self.font_modifiers],
            "showColor": self.show_color,
            "showBackgroundColor": self.show_background_color,
            "isRegex": self.is_regex,
        }


@dataclass(frozen=True)
class TextSnapshot:
    """Immutable document text at one point in time, addressed by codepoint."""

    text: str
    version: int = 0

    def __len__(self) -> int:
        return len(self.text)

    @cached_property
    def _line_starts(self) -> tuple[int, ...]:
        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        return tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, row: int) -> int:
        """Offset of the first character of ``row``."""
        if not 0 <= row < self.line_count:
            raise IndexError(f"Line {row} out of range")
        return self._line_starts[row]

    def line_end(self, row: int) -> int:
        """Offset just past the last character of ``row``, excluding the newline."""
        if row + 1 < self.line_count:
            return self._line_starts[row + 1] - 1
        self.line_start(row)
        return len(self.text)

