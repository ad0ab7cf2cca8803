"""Reference scanning for external stylesheets and scripts.

Scanning is purely syntactic: tags are matched with regular expressions over the
raw document text, without building a DOM. Each match records its span so the
substitution step can replace it in place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlsplit

from ..config import REMOTE_PREFIXES

STYLESHEET = "stylesheet"
SCRIPT = "script"

# <link rel="stylesheet" href="..."> in either attribute order, open or self-closing.
# A value may contain the other quote character, e.g. href="it's.css"
LINK_PATTERN = re.compile(
    r"""<link\s+
    (?:
        rel\s*=\s*(?P<q1>["'])stylesheet(?P=q1)\s+href\s*=\s*(?P<q2>["'])(?P<href>(?:(?!(?P=q2)).)+)(?P=q2)
      | href\s*=\s*(?P<q3>["'])(?P<href_first>(?:(?!(?P=q3)).)+)(?P=q3)\s+rel\s*=\s*(?P<q4>["'])stylesheet(?P=q4)
    )
    \s*/?>""",
    re.IGNORECASE | re.VERBOSE | re.DOTALL,
)

# <script src="..."></script>; the closing tag is optional
SCRIPT_PATTERN = re.compile(
    r"""<script\s+src\s*=\s*(?P<q>["'])(?P<src>(?:(?!(?P=q)).)+)(?P=q)\s*>(?:\s*</script\s*>)?""",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class Reference:
    kind: str
    tag: str
    path: str
    start: int
    end: int


def find_stylesheets(html: str) -> list[Reference]:
    """Find stylesheet link tags in document order."""
    refs: list[Reference] = []
    for m in LINK_PATTERN.finditer(html):
        href = m.group("href") or m.group("href_first")
        refs.append(Reference(STYLESHEET, m.group(0), href, m.start(), m.end()))
    return refs


def find_scripts(html: str) -> list[Reference]:
    """Find external script tags in document order."""
    return [
        Reference(SCRIPT, m.group(0), m.group("src"), m.start(), m.end())
        for m in SCRIPT_PATTERN.finditer(html)
    ]


def find_references(html: str) -> list[Reference]:
    """Find all stylesheet and script references, ordered by position."""
    refs = find_stylesheets(html) + find_scripts(html)
    return sorted(refs, key=lambda r: r.start)


def is_remote(path: str) -> bool:
    """Return True for references that point off the local filesystem."""
    return path.strip().lower().startswith(REMOTE_PREFIXES)


def resolve_reference(path: str, base_dir: Path) -> Path:
    """Resolve a reference path against the document's directory.

    Query strings and fragments are dropped and percent-escapes decoded, so
    `app.js?v=3` resolves to `app.js`.
    """
    local = unquote(urlsplit(path.strip()).path)
    return (base_dir / local).resolve()
