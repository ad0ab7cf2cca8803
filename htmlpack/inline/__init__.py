"""Reference scanning and inlining of stylesheets and scripts."""

from .diagnostics import Diagnostic
from .loader import read_text
from .scan import Reference, find_references, find_scripts, find_stylesheets
from .scripts import inline_scripts
from .styles import inline_styles

__all__ = [
    "Diagnostic",
    "read_text",
    "Reference",
    "find_references",
    "find_scripts",
    "find_stylesheets",
    "inline_scripts",
    "inline_styles",
]
