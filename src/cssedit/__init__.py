"""cssedit: structured-editing core of a visual CSS editor."""
from __future__ import annotations

__version__ = "0.1.0"

from cssedit.ids import generate_id
from cssedit.model import Declaration, Rule
from cssedit.transcoder import (
    escape_for_transport,
    format_css,
    format_rules,
    parse_css,
    unescape_from_transport,
)
from cssedit.history import HistoryManager, HistorySnapshot

__all__ = [
    "__version__",
    "generate_id",
    "Declaration",
    "Rule",
    "parse_css",
    "format_rules",
    "format_css",
    "escape_for_transport",
    "unescape_from_transport",
    "HistoryManager",
    "HistorySnapshot",
]
