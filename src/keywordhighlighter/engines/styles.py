"""Style resolution: keyword rule attributes to renderer-agnostic styles."""

from functools import lru_cache
from typing import NamedTuple, Optional

from keywordhighlighter.engines.rules import FontModifier, KeywordRule

HIGHLIGHT_CLASS = "kh-highlighted"
COLOR_VAR = "--kh-c"
BACKGROUND_VAR = "--kh-bgc"


def modifier_class(modifier: FontModifier) -> str:
    return f"kh-{modifier.value}"


class StyleDescriptor(NamedTuple):
    """Classes and CSS variable values for one highlighted span.

    A ``None`` color means the property is not applied at all.
    """

    class_names: tuple[str, ...]
    color_var: Optional[str] = None
    background_var: Optional[str] = None

    def css_declarations(self) -> str:
        """Render the color variables as an inline ``style`` value."""
        declarations = []
        if self.color_var is not None:
            declarations.append(f"{COLOR_VAR}: {self.color_var}")
        if self.background_var is not None:
            declarations.append(f"{BACKGROUND_VAR}: {self.background_var}")
        return "; ".join(declarations)

    def has_modifier(self, modifier: FontModifier) -> bool:
        return modifier_class(modifier) in self.class_names


class StyleResolver:
    """Maps keyword rules to style descriptors through a bounded memo."""

    def resolve(self, rule: KeywordRule) -> StyleDescriptor:
        return resolve_style(rule)


@lru_cache(maxsize=256)
def resolve_style(rule: KeywordRule) -> StyleDescriptor:
    """Build the descriptor for ``rule``; equal rules give equal descriptors."""
    class_names = [HIGHLIGHT_CLASS]
    # Enum order keeps the class list stable regardless of set iteration
    class_names.extend(
        modifier_class(modifier)
        for modifier in FontModifier
        if modifier in rule.font_modifiers
    )
    return StyleDescriptor(
        class_names=tuple(class_names),
        color_var=rule.color if rule.show_color else None,
        background_var=rule.background_color if rule.show_background_color else None,
    )
