"""CLI entry point for HtmlPack.

Two commands: `build` writes the inlined copy of a page, `scan` only lists the
stylesheet and script references it would touch.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DEFAULT_INPUT


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="htmlpack",
        description="Inline local stylesheets and scripts into a single HTML file.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"HtmlPack {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Write a self-contained copy of an HTML file")
    p_build.add_argument("input", nargs="?", type=Path, default=DEFAULT_INPUT, help="HTML file to bundle")
    p_build.add_argument("--out", "-o", type=Path, default=None, help="Output file (default: <name>_inlined.html)")
    p_build.add_argument("--quiet", "-q", action="store_true", help="Only print warnings and errors")

    p_scan = sub.add_parser("scan", help="List stylesheet and script references without writing")
    p_scan.add_argument("input", nargs="?", type=Path, default=DEFAULT_INPUT, help="HTML file to scan")

    args = parser.parse_args(argv)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "scan":
        return _cmd_scan(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .bundle.build import run_bundle
    from .config import BundleConfig

    config = BundleConfig(input_path=args.input, output_path=args.out)
    result = run_bundle(config, quiet=bool(args.quiet))
    if result is None:
        return 1

    if not args.quiet:
        print("✓ Bundle built")
        print(f"  Output: {result.output_path}")
        print(f"  Stylesheets: {result.styles_inlined}")
        print(f"  Scripts: {result.scripts_inlined}")
        print(f"  Size: {result.bytes_written / 1024:.1f} KB")
    return 0


def _cmd_scan(args: Any) -> int:
    from .inline.loader import read_text
    from .inline.scan import find_references, is_remote, resolve_reference

    if not args.input.exists():
        print(f"Error: Input file does not exist: {args.input}", file=sys.stderr)
        return 1

    try:
        html = read_text(args.input)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    refs = find_references(html)
    if not refs:
        print("No stylesheet or script references found")
        return 0

    base_dir = args.input.resolve().parent
    for ref in refs:
        if is_remote(ref.path):
            status = "remote"
        elif resolve_reference(ref.path, base_dir).exists():
            status = "ok"
        else:
            status = "missing"
        print(f"  {ref.kind:10} {status:7} {ref.path}")
    return 0


if __name__ == "__main__":
    app()
