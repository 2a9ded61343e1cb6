"""CLI output formatting utilities."""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from keywordhighlighter.engines.rules import FontModifier, KeywordRule
from keywordhighlighter.engines.styles import resolve_style
from keywordhighlighter.surfaces.terminal import rich_style

console = Console()
error_console = Console(stderr=True)


def format_rules_table(rules: Sequence[KeywordRule]) -> Table:
    """Format keyword rules as a Rich table, in priority order."""
    table = Table(title=f"Keywords (Found: {len(rules)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Keyword")
    table.add_column("Type", style="blue")
    table.add_column("Color", style="cyan")
    table.add_column("Background", style="cyan")
    table.add_column("Modifiers", style="yellow")

    for index, rule in enumerate(rules):
        sample = Text(rule.pattern, style=rich_style(resolve_style(rule)))
        table.add_row(
            str(index),
            sample,
            "regex" if rule.is_regex else "literal",
            rule.color if rule.show_color else "-",
            rule.background_color if rule.show_background_color else "-",
            ", ".join(m.value for m in FontModifier if m in rule.font_modifiers) or "-",
        )

    return table
