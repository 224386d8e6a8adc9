"""History snapshot: an immutable, independently owned copy of the rules."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from cssedit.model.operation import Operation
from cssedit.model.rule import Rule, clone_rules


@dataclass(frozen=True)
class HistorySnapshot:
    """One entry of the undo/redo log.

    ``rules`` is private to the snapshot; read it through :meth:`restore`,
    which hands out a fresh copy.
    """

    rules: tuple[Rule, ...]
    operation: Operation | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def capture(cls, rules: Iterable[Rule], operation: Operation | None = None) -> HistorySnapshot:
        """Create a snapshot stamped with the current UTC time."""
        return cls(
            rules=tuple(clone_rules(rules)),
            operation=copy.deepcopy(operation),
        )

    def restore(self) -> list[Rule]:
        """Return a deep copy of the captured rules."""
        return clone_rules(self.rules)

    def same_rules(self, rules: Iterable[Rule]) -> bool:
        """True if *rules* is structurally equal to the captured rules."""
        return list(self.rules) == list(rules)
