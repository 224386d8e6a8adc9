"""Tests for edit operation tags."""

import pytest

from cssedit.model import (
    AddRule,
    Declaration,
    DeleteRule,
    ModifyDeclaration,
    ModifyRule,
    Rule,
    operation_from_dict,
)


def _rule(id="r1", value="red"):
    return Rule(id=id, selector=".a", declarations=[Declaration("color", value)])


class TestOperationKinds:
    def test_kind_tags(self):
        assert AddRule.kind == "add_rule"
        assert DeleteRule.kind == "delete_rule"
        assert ModifyRule.kind == "modify_rule"
        assert ModifyDeclaration.kind == "modify_declaration"

    def test_kind_is_not_a_field(self):
        op = AddRule(rule=_rule())
        assert op.to_dict()["type"] == "add_rule"
        assert op == AddRule(_rule())


class TestOperationSerialisation:
    @pytest.mark.parametrize(
        "op",
        [
            AddRule(rule=_rule()),
            DeleteRule(rule=_rule(), index=3),
            ModifyRule(old_rule=_rule(), new_rule=_rule(value="blue"), index=0),
            ModifyDeclaration(rule_id="r1", old_rule=_rule(), new_rule=_rule(value="blue")),
        ],
    )
    def test_from_dict_rebuilds_operation(self, op):
        assert operation_from_dict(op.to_dict()) == op

    def test_camel_case_keys(self):
        data = ModifyDeclaration(rule_id="r1", old_rule=_rule(), new_rule=_rule()).to_dict()
        assert set(data) == {"type", "ruleId", "oldRule", "newRule"}

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown operation type"):
            operation_from_dict({"type": "rename_everything"})
