"""Stylesheet inlining: <link rel="stylesheet"> becomes <style>."""

from __future__ import annotations

from pathlib import Path

from .diagnostics import Diagnostic
from .scan import find_stylesheets
from .substitute import inline_references


def style_block(css: str) -> str:
    return f"<style>\n{css}\n</style>"


def inline_styles(html: str, base_dir: Path, diagnostics: list[Diagnostic] | None = None) -> str:
    """Replace local stylesheet links with embedded style blocks.

    Args:
        html: Document text
        base_dir: Directory the stylesheet paths are relative to
        diagnostics: Optional list that receives progress and warnings

    Returns:
        Document text with every resolvable stylesheet inlined
    """
    return inline_references(
        html,
        find_stylesheets(html),
        base_dir,
        wrap=style_block,
        label="CSS",
        diagnostics=diagnostics,
    )
