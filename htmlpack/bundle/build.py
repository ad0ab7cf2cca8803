"""Bundle builder orchestrating load, inline and write."""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel

from ..config import ENCODING, BundleConfig, default_output_path
from ..errors import MissingInputError, WriteError
from ..inline.diagnostics import Diagnostic, info
from ..inline.loader import read_document
from ..inline.scan import SCRIPT, STYLESHEET
from ..inline.scripts import inline_scripts
from ..inline.styles import inline_styles


class BundleResult(BaseModel):
    """Result of bundling a document."""

    input_path: Path
    output_path: Path
    styles_inlined: int
    scripts_inlined: int
    bytes_written: int
    diagnostics: list[Diagnostic]

    @property
    def warnings(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.level == "warning"]


def inline_html(html: str, base_dir: Path) -> tuple[str, list[Diagnostic]]:
    """Inline stylesheets, then scripts, into a document.

    Args:
        html: Document text
        base_dir: Directory that reference paths resolve against

    Returns:
        Tuple of (new document text, diagnostics in processing order)
    """
    diagnostics: list[Diagnostic] = []
    html = inline_styles(html, base_dir, diagnostics)
    html = inline_scripts(html, base_dir, diagnostics)
    return html, diagnostics


def build_bundle(
    input_path: Path,
    output_path: Path | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> BundleResult:
    """Build a self-contained copy of an HTML document.

    Args:
        input_path: HTML document to bundle
        output_path: Where to write the bundle (defaults to `<stem>_inlined.html`
            next to the input)
        diagnostics: Optional list that receives progress and warnings as they
            are produced, so they survive a failed write

    Returns:
        BundleResult with counts and diagnostics

    Raises:
        MissingInputError: If the input document does not exist
        ReadError: If the input document cannot be read
        WriteError: If the bundle cannot be written
    """
    if not input_path.exists():
        raise MissingInputError(input_path)

    if output_path is None:
        output_path = default_output_path(input_path)

    base_dir = input_path.resolve().parent
    html, encoding = read_document(input_path)

    if diagnostics is None:
        diagnostics = []
    info(diagnostics, f"Read HTML file: {input_path}", str(input_path))

    html, inline_diags = inline_html(html, base_dir)
    diagnostics.extend(inline_diags)

    payload = _encode(html, encoding)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)
    except OSError as e:
        raise WriteError(output_path, e.strerror or str(e)) from e

    info(diagnostics, f"Done, saved to: {output_path}", str(output_path))

    return BundleResult(
        input_path=input_path,
        output_path=output_path,
        styles_inlined=_count_inlined(inline_diags, STYLESHEET),
        scripts_inlined=_count_inlined(inline_diags, SCRIPT),
        bytes_written=len(payload),
        diagnostics=list(diagnostics),
    )


def _encode(html: str, encoding: str) -> bytes:
    """Encode in the document's own encoding, or UTF-8 when inlined text does not fit."""
    try:
        return html.encode(encoding)
    except UnicodeEncodeError:
        return html.encode(ENCODING)


def _count_inlined(diagnostics: list[Diagnostic], kind: str) -> int:
    return sum(1 for d in diagnostics if d.level == "info" and d.kind == kind)


def print_diagnostics(diagnostics: list[Diagnostic], quiet: bool = False) -> None:
    """Print info lines to stdout and warnings to stderr."""
    for d in diagnostics:
        if d.level == "warning":
            print(f"Warning: {d.message}", file=sys.stderr)
        elif not quiet:
            print(d.message)


def run_bundle(config: BundleConfig, quiet: bool = False) -> BundleResult | None:
    """Run a bundle build, reporting every outcome instead of raising.

    Returns:
        BundleResult on success, None if the run failed
    """
    diagnostics: list[Diagnostic] = []
    try:
        try:
            result = build_bundle(config.input_path, config.resolved_output(), diagnostics)
        finally:
            # Per-reference warnings are reported even when the write fails.
            print_diagnostics(diagnostics, quiet=quiet)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return None

    return result
