"""Bundle building."""

from .build import BundleResult, build_bundle, inline_html, run_bundle

__all__ = [
    "BundleResult",
    "build_bundle",
    "inline_html",
    "run_bundle",
]
