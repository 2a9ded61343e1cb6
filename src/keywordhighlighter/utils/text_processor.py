"""Text processing utilities for word tokenization and selection cleanup."""

import re
from typing import Iterator

# Characters that separate words for literal keyword matching
WORD_DELIMITERS = " ,.;\n\t"

_TOKEN_RE = re.compile(r"[^ ,.;\n\t]+")


def iter_word_tokens(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield ``(word, start, end)`` for every word in ``text``.

    Words are runs of non-delimiter characters with any other surrounding
    whitespace (``\\r``, non-breaking spaces, ...) trimmed off. Offsets point
    at the trimmed word inside the original text.
    """
    for match in _TOKEN_RE.finditer(text):
        raw = match.group()
        word = raw.strip()
        if not word:
            continue
        start = match.start() + (len(raw) - len(raw.lstrip()))
        yield word, start, start + len(word)


def split_into_words(text: str) -> list[str]:
    """Split text into trimmed, non-empty words."""
    return [word for word, _, _ in iter_word_tokens(text)]


def clean_selection(selection: str) -> str:
    """Normalize an editor selection before turning it into a keyword.

    Surrounding whitespace and one trailing colon are removed, so selecting
    ``TODO:`` yields ``TODO``.
    """
    cleaned = selection.strip()
    if cleaned.endswith(":"):
        cleaned = cleaned[:-1]
    return cleaned
