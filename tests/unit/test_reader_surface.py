"""Unit tests for the rendered-surface adapter."""

import pytest
from bs4 import BeautifulSoup

from keywordhighlighter.engines.rules import KeywordRule
from keywordhighlighter.surfaces.reader import ReaderHighlighter, highlight_html


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_wraps_matches_in_styled_spans(sample_rules: list[KeywordRule]) -> None:
    r"""`TODO\.*` claims "TODO." only: group 1 of `\b(...)\b` stops before
    "fix". The product walkthrough describes "TODO.fix" as one highlight;
    that example and the word-boundary wrapping disagree, and the wrapping
    wins until product confirms otherwise.
    """
    soup = _soup("<p>TODO.fix this FIXME later</p>")

    ReaderHighlighter(sample_rules).process(soup)

    spans = soup.find_all("span")
    assert [span.get_text() for span in spans] == ["TODO.", "FIXME"]
    assert spans[0]["class"] == ["kh-highlighted"]
    assert spans[0]["style"] == "--kh-c: #000000; --kh-bgc: #A9CCE3"
    assert spans[1]["class"] == ["kh-highlighted", "kh-bold"]
    assert soup.p.get_text() == "TODO.fix this FIXME later"


def test_text_is_preserved_exactly(sample_rules: list[KeywordRule]) -> None:
    original = "  FIXME, fixme;TODO...  FIXME\n"
    soup = _soup(f"<div>{original}</div>")

    ReaderHighlighter(sample_rules).process(soup)

    assert "".join(str(node) if isinstance(node, str) else node.get_text()
                   for node in soup.div.contents) == original
    assert len(soup.div.find_all("span")) == 4


def test_second_pass_changes_nothing(sample_rules: list[KeywordRule]) -> None:
    soup = _soup("<p>FIXME <b>TODO</b> and <i>FIXME again</i></p>")
    highlighter = ReaderHighlighter(sample_rules)

    highlighter.process(soup)
    first = str(soup)
    highlighter.process(soup)

    assert str(soup) == first
    assert len(soup.find_all("span")) == 3


@pytest.mark.parametrize(
    "rules, html, first_pass",
    [
        (
            [KeywordRule(pattern="foo", is_regex=True), KeywordRule(pattern="-bar")],
            "<p>foo-bar</p>",
            ["foo"],
        ),
        (
            [
                KeywordRule(pattern="TODO\\.*", is_regex=True),
                KeywordRule(pattern="^fix", is_regex=True),
            ],
            "<p>TODO.fix</p>",
            ["TODO."],
        ),
    ],
)
def test_second_pass_keeps_context_of_earlier_highlights(
    rules: list[KeywordRule], html: str, first_pass: list[str]
) -> None:
    soup = _soup(html)
    highlighter = ReaderHighlighter(rules)

    highlighter.process(soup)
    first = str(soup)
    highlighter.process(soup)

    assert [span.get_text() for span in soup.find_all("span")] == first_pass
    assert str(soup) == first


def test_nested_elements_are_processed_in_place(sample_rules: list[KeywordRule]) -> None:
    soup = _soup("<ul><li>one FIXME</li><li><em>FIXME</em> two</li></ul>")

    ReaderHighlighter(sample_rules).process(soup)

    items = soup.find_all("li")
    assert items[0].span.get_text() == "FIXME"
    assert items[1].em.span.get_text() == "FIXME"
    assert [li.get_text() for li in items] == ["one FIXME", "FIXME two"]


def test_hidden_colors_omit_style_attribute() -> None:
    rule = KeywordRule(pattern="FIXME", show_color=False, show_background_color=False)
    soup = _soup("<p>FIXME</p>")

    ReaderHighlighter([rule]).process(soup)

    assert soup.span is not None
    assert not soup.span.has_attr("style")


def test_tolerates_empty_and_textless_trees(sample_rules: list[KeywordRule]) -> None:
    for html in ["", "<div></div>", "<p>   \n  </p>", "<img src='a.png'/>"]:
        soup = _soup(html)
        before = str(soup)

        ReaderHighlighter(sample_rules).process(soup)

        assert str(soup) == before


def test_skips_scripts_comments_and_existing_highlights(sample_rules: list[KeywordRule]) -> None:
    html = (
        "<div><script>var FIXME = 1;</script><!-- FIXME -->"
        '<span class="kh-highlighted">FIXME</span></div>'
    )
    soup = _soup(html)

    ReaderHighlighter(sample_rules).process(soup)

    assert str(soup) == html


def test_highlight_html_serializes(sample_rules: list[KeywordRule]) -> None:
    result = highlight_html("<p>a FIXME &amp; b</p>", sample_rules)

    assert result == (
        '<p>a <span class="kh-highlighted kh-bold" '
        'style="--kh-c: #000000; --kh-bgc: #BAA2E8">FIXME</span> &amp; b</p>'
    )
