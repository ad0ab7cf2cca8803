"""Shared resolve/read/replace loop used by the style and script inliners."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..errors import ReadError
from .diagnostics import Diagnostic, info, warning
from .loader import read_text
from .scan import Reference, is_remote, resolve_reference


def inline_references(
    html: str,
    refs: list[Reference],
    base_dir: Path,
    wrap: Callable[[str], str],
    label: str,
    diagnostics: list[Diagnostic] | None = None,
) -> str:
    """Replace each reference with its file content wrapped by `wrap`.

    References are processed in the given order and replaced at the span recorded
    when they were scanned, so identical tags at different positions are each
    handled on their own. A reference whose file is missing or unreadable is left
    verbatim and a warning is recorded.

    Args:
        html: Document text the references were scanned from
        refs: References ordered by position
        base_dir: Directory that relative paths resolve against
        wrap: Builds the embedded element from the file content
        label: Asset label used in diagnostics ("CSS", "JS")
        diagnostics: Optional list that receives progress and warnings

    Returns:
        New document text
    """
    parts: list[str] = []
    cursor = 0

    for ref in refs:
        if is_remote(ref.path):
            warning(
                diagnostics,
                f"{label} reference is not a local file, keeping original tag: {ref.path}",
                ref.path,
                ref.kind,
            )
            continue

        absolute_path = resolve_reference(ref.path, base_dir)
        if not absolute_path.exists():
            warning(
                diagnostics,
                f"{label} file does not exist: {absolute_path}, keeping original tag",
                ref.path,
                ref.kind,
            )
            continue

        try:
            content = read_text(absolute_path)
        except ReadError as e:
            warning(
                diagnostics,
                f"Failed to inline {label} {ref.path} ({e}), keeping original tag",
                ref.path,
                ref.kind,
            )
            continue

        parts.append(html[cursor:ref.start])
        parts.append(wrap(content))
        cursor = ref.end
        info(diagnostics, f"Inlined {label}: {ref.path}", ref.path, ref.kind)

    parts.append(html[cursor:])
    return "".join(parts)
