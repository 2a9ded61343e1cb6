"""Utility functions for text processing and validation."""

from keywordhighlighter.utils.text_processor import (
    clean_selection,
    iter_word_tokens,
    split_into_words,
)
from keywordhighlighter.utils.validators import read_text_file, validate_text_file

__all__ = [
    "clean_selection",
    "iter_word_tokens",
    "split_into_words",
    "read_text_file",
    "validate_text_file",
]
