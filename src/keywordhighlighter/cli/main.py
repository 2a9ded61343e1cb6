"""Command line entry point."""

import argparse
import sys
from pathlib import Path
from typing import Sequence

from keywordhighlighter import __version__
from keywordhighlighter.cli.formatters import console, error_console, format_rules_table
from keywordhighlighter.config import Config
from keywordhighlighter.database.manager import close_database, initialize_database
from keywordhighlighter.database.store import RuleStore, rules_from_config
from keywordhighlighter.exceptions import KeywordHighlighterError
from keywordhighlighter.logging_config import configure_logging, get_logger
from keywordhighlighter.surfaces.reader import highlight_html
from keywordhighlighter.surfaces.terminal import render_text
from keywordhighlighter.utils.validators import read_text_file

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyword-highlighter",
        description="Highlight user-defined keywords in text and HTML documents",
    )
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--database", help="Override the rule database path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    commands = parser.add_subparsers(dest="command", required=True)

    highlight = commands.add_parser("highlight", help="Print a text file with keywords highlighted")
    highlight.add_argument("file", type=Path)

    html = commands.add_parser("html", help="Wrap keywords of an HTML file in styled spans")
    html.add_argument("file", type=Path)
    html.add_argument("-o", "--output", type=Path, help="Write to a file instead of stdout")

    rules = commands.add_parser("rules", help="Manage keyword rules")
    rule_commands = rules.add_subparsers(dest="rules_command", required=True)
    rule_commands.add_parser("list", help="Show the rules in priority order")
    rule_commands.add_parser("export", help="Print the rules as JSON")
    import_parser = rule_commands.add_parser("import", help="Replace the rules from a JSON file")
    import_parser.add_argument("file", type=Path)

    tui = commands.add_parser("tui", help="Open the interactive editor")
    tui.add_argument("file", type=Path, nargs="?")

    return parser


def run(args: argparse.Namespace, config: Config) -> int:
    store = RuleStore()
    store.seed_defaults(rules_from_config(config))

    if args.command == "highlight":
        text = read_text_file(args.file)
        console.print(render_text(text, store.load_rules()), end="")
    elif args.command == "html":
        result = highlight_html(read_text_file(args.file), store.load_rules())
        if args.output:
            args.output.write_text(result, encoding="utf-8")
        else:
            sys.stdout.write(result)
    elif args.command == "rules":
        if args.rules_command == "list":
            console.print(format_rules_table(store.load_rules()))
        elif args.rules_command == "export":
            sys.stdout.write(store.export_json() + "\n")
        else:
            imported = store.import_json(read_text_file(args.file))
            console.print(f"Imported {len(imported)} keywords")
    elif args.command == "tui":
        from keywordhighlighter.tui.app import KeywordHighlighterApp

        KeywordHighlighterApp(config, store, text_file=args.file).run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(args.config)
        if args.database:
            config.database.path = args.database
        if args.verbose:
            config.logging.level = "DEBUG"
        configure_logging(config)
        initialize_database(config)
        try:
            return run(args, config)
        finally:
            close_database()
    except KeywordHighlighterError as e:
        logger.debug("Command failed", error=e.message, details=e.details)
        error_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            error_console.print(e.details, style="dim")
        return 1


if __name__ == "__main__":
    sys.exit(main())
