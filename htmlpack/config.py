"""Configuration constants and paths for HtmlPack."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel

# Input document used when no path is given on the command line
DEFAULT_INPUT = Path(os.getenv("HTMLPACK_INPUT", "index.html"))

# Output is written next to the input: index.html -> index_inlined.html
OUTPUT_SUFFIX = os.getenv("HTMLPACK_OUTPUT_SUFFIX", "_inlined")

# Text encodings for reading assets and writing the bundle
ENCODING = os.getenv("HTMLPACK_ENCODING", "utf-8")
FALLBACK_ENCODING = "latin-1"

# References starting with these are never looked up on disk
REMOTE_PREFIXES = ("http://", "https://", "//", "data:")


def default_output_path(input_path: Path) -> Path:
    """Derive the bundle path for an input document."""
    return input_path.with_name(f"{input_path.stem}{OUTPUT_SUFFIX}{input_path.suffix}")


class BundleConfig(BaseModel):
    """Paths for a single bundling run."""

    input_path: Path = DEFAULT_INPUT
    output_path: Path | None = None

    def resolved_output(self) -> Path:
        if self.output_path is not None:
            return self.output_path
        return default_output_path(self.input_path)
