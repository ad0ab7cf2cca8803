"""Script inlining: <script src> becomes an embedded <script>."""

from __future__ import annotations

from pathlib import Path

from .diagnostics import Diagnostic
from .scan import find_scripts
from .substitute import inline_references


def script_block(js: str) -> str:
    return f"<script>\n{js}\n</script>"


def inline_scripts(html: str, base_dir: Path, diagnostics: list[Diagnostic] | None = None) -> str:
    """Replace local external scripts with embedded script blocks."""
    return inline_references(
        html,
        find_scripts(html),
        base_dir,
        wrap=script_block,
        label="JS",
        diagnostics=diagnostics,
    )
