from cssedit.transcoder.escape import escape_for_transport, unescape_from_transport
from cssedit.transcoder.formatter import format_css, format_rules
from cssedit.transcoder.parser import parse_css

__all__ = [
    "parse_css",
    "format_rules",
    "format_css",
    "escape_for_transport",
    "unescape_from_transport",
]
