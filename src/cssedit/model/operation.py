"""Edit operations: tagged descriptions of the change that produced a state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from cssedit.model.rule import Rule


@dataclass(frozen=True)
class AddRule:
    kind: ClassVar[str] = "add_rule"

    rule: Rule

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "rule": self.rule.to_dict()}


@dataclass(frozen=True)
class DeleteRule:
    kind: ClassVar[str] = "delete_rule"

    rule: Rule
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "rule": self.rule.to_dict(), "index": self.index}


@dataclass(frozen=True)
class ModifyRule:
    kind: ClassVar[str] = "modify_rule"

    old_rule: Rule
    new_rule: Rule
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "oldRule": self.old_rule.to_dict(),
            "newRule": self.new_rule.to_dict(),
            "index": self.index,
        }


@dataclass(frozen=True)
class ModifyDeclaration:
    kind: ClassVar[str] = "modify_declaration"

    rule_id: str
    old_rule: Rule
    new_rule: Rule

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "ruleId": self.rule_id,
            "oldRule": self.old_rule.to_dict(),
            "newRule": self.new_rule.to_dict(),
        }


Operation = Union[AddRule, DeleteRule, ModifyRule, ModifyDeclaration]


def operation_from_dict(data: dict[str, Any]) -> Operation:
    """Rebuild an operation from its ``to_dict`` form.

    Raises ValueError for an unknown ``type`` tag.
    """
    kind = data.get("type")
    if kind == AddRule.kind:
        return AddRule(rule=Rule.from_dict(data["rule"]))
    if kind == DeleteRule.kind:
        return DeleteRule(rule=Rule.from_dict(data["rule"]), index=int(data["index"]))
    if kind == ModifyRule.kind:
        return ModifyRule(
            old_rule=Rule.from_dict(data["oldRule"]),
            new_rule=Rule.from_dict(data["newRule"]),
            index=int(data["index"]),
        )
    if kind == ModifyDeclaration.kind:
        return ModifyDeclaration(
            rule_id=str(data["ruleId"]),
            old_rule=Rule.from_dict(data["oldRule"]),
            new_rule=Rule.from_dict(data["newRule"]),
        )
    raise ValueError(f"Unknown operation type: {kind!r}")
