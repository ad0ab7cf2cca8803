"""File loading for documents and the assets they reference."""

from __future__ import annotations

from pathlib import Path

from ..config import ENCODING, FALLBACK_ENCODING
from ..errors import ReadError


def read_document(path: Path) -> tuple[str, str]:
    """Read a file and report the encoding it was decoded with.

    Bytes are decoded without newline translation so content is reproduced
    exactly.

    Args:
        path: File to read

    Returns:
        Tuple of (decoded content, encoding name)

    Raises:
        ReadError: If the file is missing or unreadable
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    try:
        return content.decode(ENCODING), ENCODING
    except UnicodeDecodeError:
        return content.decode(FALLBACK_ENCODING), FALLBACK_ENCODING


def read_text(path: Path) -> str:
    """Read a file's full text content, raising ReadError on failure."""
    return read_document(path)[0]
