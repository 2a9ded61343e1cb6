"""Textual front end for the keyword highlighter."""
