"""Tests for the Rule and Declaration model."""

import pytest

from cssedit.model import Declaration, Rule, clone_rules, rules_from_dicts, rules_to_dicts


def _rule(id="r1", selector=".a", pairs=(("color", "red"),)):
    return Rule(id=id, selector=selector, declarations=[Declaration(p, v) for p, v in pairs])


class TestDeclaration:
    def test_is_frozen(self):
        decl = Declaration(property="color", value="red")
        with pytest.raises(AttributeError):
            decl.value = "blue"  # type: ignore[misc]

    def test_dict_round_trip(self):
        decl = Declaration(property="margin", value="0")
        assert Declaration.from_dict(decl.to_dict()) == decl


class TestRuleClone:
    def test_clone_is_equal(self):
        rule = _rule()
        assert rule.clone() == rule

    def test_clone_is_independent(self):
        rule = _rule()
        copy = rule.clone()
        copy.selector = ".b"
        copy.declarations.append(Declaration("top", "0"))
        assert rule.selector == ".a"
        assert len(rule.declarations) == 1

    def test_clone_rules_copies_every_rule(self):
        rules = [_rule(id="1"), _rule(id="2")]
        copies = clone_rules(rules)
        assert copies == rules
        assert all(a is not b for a, b in zip(copies, rules))


class TestRuleEquality:
    def test_ids_take_part_in_equality(self):
        assert _rule(id="1") != _rule(id="2")

    def test_declaration_order_matters(self):
        a = _rule(pairs=(("x", "1"), ("y", "2")))
        b = _rule(pairs=(("y", "2"), ("x", "1")))
        assert a != b


class TestRuleSerialisation:
    def test_to_dict_shape(self):
        assert _rule().to_dict() == {
            "id": "r1",
            "selector": ".a",
            "declarations": [{"property": "color", "value": "red"}],
        }

    def test_sequence_round_trip(self):
        rules = [_rule(id="1"), _rule(id="2", selector="#x", pairs=(("a", "b"), ("c", "d")))]
        assert rules_from_dicts(rules_to_dicts(rules)) == rules

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            Rule.from_dict({"id": "1", "selector": ".a"})
