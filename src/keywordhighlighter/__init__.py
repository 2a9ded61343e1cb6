"""Keyword highlighting for editable buffers and rendered documents."""

__version__ = "0.1.0"
