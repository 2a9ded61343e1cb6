"""Input validation utilities."""

from pathlib import Path

import chardet

from keywordhighlighter.exceptions import ValidationError


def validate_encoding(file_path: Path, encoding: str = "utf-8") -> str:
    """Validate and detect file encoding."""
    try:
        with open(file_path, "rb") as f:
            raw_data = f.read(10000)  # Sample first 10KB
    except OSError as e:
        raise ValidationError(f"Failed to read {file_path}: {e}") from e

    result = chardet.detect(raw_data)
    detected_encoding = result.get("encoding") or encoding
    confidence = result.get("confidence") or 0.0

    if confidence < 0.7:
        # Try to read with specified encoding as fallback
        try:
            with open(file_path, "r", encoding=encoding) as f:
                f.read()
            return encoding
        except UnicodeDecodeError:
            raise ValidationError(
                f"Cannot determine encoding for {file_path}. "
                f"Detected: {detected_encoding} (confidence: {confidence:.2f})"
            )

    # ASCII is a subset of UTF-8; prefer the wider codec
    if detected_encoding.lower() == "ascii":
        return encoding
    return detected_encoding


def validate_text_file(file_path: Path) -> tuple[Path, str]:
    """Validate a text file and return path and encoding."""
    if not file_path.exists():
        raise ValidationError(f"File does not exist: {file_path}")

    if not file_path.is_file():
        raise ValidationError(f"Path is not a file: {file_path}")

    file_size = file_path.stat().st_size
    if file_size > 100 * 1024 * 1024:  # 100MB
        raise ValidationError(
            f"File is too large ({file_size / 1024 / 1024:.1f}MB). "
            "Maximum size is 100MB."
        )

    if file_size == 0:
        return file_path, "utf-8"

    encoding = validate_encoding(file_path)

    return file_path, encoding


def read_text_file(file_path: Path) -> str:
    """Validate ``file_path`` and return its decoded contents."""
    file_path, encoding = validate_text_file(file_path)
    try:
        return file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ValidationError(f"Failed to read {file_path}: {e}") from e
