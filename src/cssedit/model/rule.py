"""Rule model: Declaration and Rule dataclasses plus sequence helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule."""

    property: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"property": self.property, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Declaration:
        return cls(property=str(data["property"]), value=str(data["value"]))


@dataclass
class Rule:
    """A selector with its ordered declarations.

    Rules are mutable so the editing layer can change them in place; anything
    that needs an independent copy (history, persistence) goes through
    :meth:`clone`.
    """

    id: str
    selector: str
    declarations: list[Declaration] = field(default_factory=list)

    def clone(self) -> Rule:
        """Return a structural deep copy of this rule."""
        # Declarations are frozen, so copying the list is a full deep copy.
        return Rule(id=self.id, selector=self.selector, declarations=list(self.declarations))

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "selector": self.selector,
            "declarations": [d.to_dict() for d in self.declarations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rule:
        """Build a rule from its JSON shape; raises KeyError/TypeError if malformed."""
        return cls(
            id=str(data["id"]),
            selector=str(data["selector"]),
            declarations=[Declaration.from_dict(d) for d in data["declarations"]],
        )


def clone_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Deep-copy a rule sequence, preserving order."""
    return [rule.clone() for rule in rules]


def rules_to_dicts(rules: Iterable[Rule]) -> list[dict[str, Any]]:
    return [rule.to_dict() for rule in rules]


def rules_from_dicts(items: Iterable[dict[str, Any]]) -> list[Rule]:
    return [Rule.from_dict(item) for item in items]
