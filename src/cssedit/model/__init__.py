"""cssedit model layer -- public type re-exports."""

from cssedit.model.operation import (
    AddRule,
    DeleteRule,
    ModifyDeclaration,
    ModifyRule,
    Operation,
    operation_from_dict,
)
from cssedit.model.rule import (
    Declaration,
    Rule,
    clone_rules,
    rules_from_dicts,
    rules_to_dicts,
)

__all__ = [
    # rule
    "Declaration",
    "Rule",
    "clone_rules",
    "rules_to_dicts",
    "rules_from_dicts",
    # operation
    "Operation",
    "AddRule",
    "DeleteRule",
    "ModifyRule",
    "ModifyDeclaration",
    "operation_from_dict",
]
