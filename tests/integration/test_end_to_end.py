"""End-to-end tests through the command line entry point."""

import json
from pathlib import Path

import pytest

from keywordhighlighter.cli.main import main


@pytest.fixture
def db_args(tmp_path: Path) -> list[str]:
    return ["--database", str(tmp_path / "cli.db")]


def test_html_command_highlights_default_keywords(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    page = tmp_path / "page.html"
    page.write_text("<p>TODO.fix this FIXME later</p>", encoding="utf-8")

    assert main([*db_args, "html", str(page)]) == 0

    out = capsys.readouterr().out
    assert '<span class="kh-highlighted" style="--kh-c: #000000; --kh-bgc: #A9CCE3">TODO.</span>' in out
    assert '--kh-bgc: #BAA2E8">FIXME</span> later</p>' in out


def test_html_command_writes_output_file(tmp_path: Path, db_args: list[str]) -> None:
    page = tmp_path / "page.html"
    page.write_text("<p>туду. список</p>", encoding="utf-8")
    output = tmp_path / "out.html"

    assert main([*db_args, "html", str(page), "-o", str(output)]) == 0

    assert "туду</span>. список" in output.read_text(encoding="utf-8")


def test_rules_export_import_round_trip(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    rules_file = tmp_path / "rules.json"
    rules_file.write_text(
        json.dumps([{"keyword": "NOTE", "color": "#111111", "backgroundColor": "#EEEEEE"}]),
        encoding="utf-8",
    )

    assert main([*db_args, "rules", "import", str(rules_file)]) == 0
    capsys.readouterr()

    assert main([*db_args, "rules", "export"]) == 0
    exported = json.loads(capsys.readouterr().out)

    assert [rule["keyword"] for rule in exported] == ["NOTE"]
    assert exported[0]["showColor"] is True


def test_invalid_import_reports_error(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    rules_file = tmp_path / "rules.json"
    rules_file.write_text('{"keyword": "NOTE"}', encoding="utf-8")

    assert main([*db_args, "rules", "import", str(rules_file)]) == 1

    assert "Expected an array of keyword styles" in capsys.readouterr().err


def test_missing_input_file_reports_error(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([*db_args, "highlight", str(tmp_path / "nope.txt")]) == 1

    assert "File does not exist" in capsys.readouterr().err


def test_highlight_command_prints_text(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("remember FIXME\n", encoding="utf-8")

    assert main([*db_args, "highlight", str(notes)]) == 0

    assert "remember FIXME" in capsys.readouterr().out


def test_mistyped_config_value_reports_error(
    tmp_path: Path, db_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[logging]\nlevel = 5\n", encoding="utf-8")

    assert main(["--config", str(config_file), *db_args, "rules", "list"]) == 1

    assert "logging.level must be a str" in capsys.readouterr().err
