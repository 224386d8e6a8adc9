"""Regex-based parser turning CSS text into a rule sequence.

This is a two-stage scan, not a CSS grammar:

    1. strip ``/* ... */`` comments;
    2. match ``selector { body }`` blocks, then ``property: value;`` pairs
       inside each body.

Nested braces (at-rules), and literal ``{``, ``}``, ``:`` or ``;`` inside
selectors or values are not understood. Unparseable fragments are dropped,
never reported.
"""

from __future__ import annotations

import logging
import re

from cssedit.ids import generate_id
from cssedit.model.rule import Declaration, Rule

__all__ = ["parse_css"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule block: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything up to the opening brace
    \s*\{
    (?P<body>[^}]*)         # declaration text, no nesting
    \}
    """,
    re.VERBOSE,
)

# Matches one declaration; the trailing semicolon is optional for the last one
_DECL_RE = re.compile(
    r"""
    (?P<property>[^:]+)     # property name, up to the first colon
    :\s*
    (?P<value>[^;]+)        # value, up to the semicolon or end of body
    ;?
    """,
    re.VERBOSE,
)


def _parse_declarations(body: str) -> list[Declaration]:
    declarations: list[Declaration] = []
    for match in _DECL_RE.finditer(body):
        declarations.append(
            Declaration(
                property=match.group("property").strip(),
                value=match.group("value").strip(),
            )
        )
    return declarations


def parse_css(css_text: str) -> list[Rule]:
    """Parse CSS text into an ordered list of rules.

    Rules with an empty selector, an empty body, or a body that yields no
    declarations are skipped. Every returned rule gets a fresh id.
    """
    cleaned = _COMMENT_RE.sub("", css_text)
    rules: list[Rule] = []
    for match in _RULE_RE.finditer(cleaned):
        selector = match.group("selector").strip()
        body = match.group("body").strip()
        if not selector or not body:
            continue
        declarations = _parse_declarations(body)
        if declarations:
            rules.append(Rule(id=generate_id(), selector=selector, declarations=declarations))
    logger.debug("Parsed %d rule(s) from %d characters of CSS", len(rules), len(css_text))
    return rules
