"""Serialise a rule sequence back to CSS text."""

from __future__ import annotations

from typing import Iterable

from cssedit.model.rule import Rule
from cssedit.transcoder.parser import parse_css

__all__ = ["format_rules", "format_css"]


def _format_rule(rule: Rule) -> str:
    body = "\n".join(f"  {d.property}: {d.value};" for d in rule.declarations)
    return f"{rule.selector} {{\n{body}\n}}"


def format_rules(rules: Iterable[Rule]) -> str:
    """Render rules one block each, separated by a blank line."""
    return "\n\n".join(_format_rule(rule) for rule in rules)


def format_css(css_text: str) -> str:
    """Normalise CSS text by parsing it and formatting the result.

    Comments, unparseable fragments and original whitespace are lost.
    """
    return format_rules(parse_css(css_text))
