"""Run-level errors raised while bundling a document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class BundleError(Exception):
    """Base class for errors that abort a bundling run."""


@dataclass
class MissingInputError(BundleError):
    """Raised when the input document does not exist."""

    path: Path

    def __str__(self) -> str:
        return f"Input file does not exist: {self.path}"


@dataclass
class ReadError(BundleError):
    """Raised when a file cannot be read."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Cannot read {self.path}: {self.reason}"


@dataclass
class WriteError(BundleError):
    """Raised when the bundled document cannot be written."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Cannot write {self.path}: {self.reason}"
