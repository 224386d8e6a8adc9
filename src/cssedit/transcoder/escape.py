"""Escape and unescape CSS text for embedding in a JSON string literal.

Line endings are not round-tripped exactly: both CRLF and LF are exported as
the literal text ``\\r\\n`` and come back as a single LF.
"""

from __future__ import annotations

import re

__all__ = ["escape_for_transport", "unescape_from_transport"]

_LINE_BREAK_RE = re.compile(r"\r?\n")

# One escape sequence per match, scanned left to right
_ESCAPE_SEQ_RE = re.compile(r'\\(?:r\\n|n|"|\\)')

_UNESCAPED = {
    r"\r\n": "\n",
    r"\n": "\n",
    r"\"": '"',
    "\\\\": "\\",
}


def escape_for_transport(css: str) -> str:
    """Escape backslashes, double quotes and line breaks."""
    escaped = css.replace("\\", "\\\\").replace('"', '\\"')
    return _LINE_BREAK_RE.sub(lambda _m: r"\r\n", escaped)


def unescape_from_transport(text: str) -> str:
    """Reverse :func:`escape_for_transport`, normalising line breaks to LF."""
    return _ESCAPE_SEQ_RE.sub(lambda m: _UNESCAPED[m.group(0)], text)
