"""Editing session: live rules wired to history and autosave."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from cssedit.events.bus import EventBus
from cssedit.events.types import RulesReplaced
from cssedit.history.manager import DEFAULT_MAX_HISTORY_SIZE, HistoryManager
from cssedit.model.operation import Operation
from cssedit.model.rule import Rule, clone_rules
from cssedit.persistence.autosave import AutoSave
from cssedit.transcoder import format_rules, parse_css

logger = logging.getLogger(__name__)


class EditorSession:
    """Owns the live rule sequence of one editor.

    Every edit goes through :meth:`apply`, which records a history snapshot
    and schedules an autosave. Undo and redo restore a snapshot into the live
    rules and save that too. Edits, undo and redo are serialized so the live
    rules always match the history cursor.
    """

    def __init__(
        self,
        history: HistoryManager | None = None,
        autosave: AutoSave | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._bus = bus if bus is not None else EventBus()
        if history is None:
            history = HistoryManager(DEFAULT_MAX_HISTORY_SIZE, bus=self._bus)
        self._history = history
        self._autosave = autosave
        self._rules: list[Rule] = []
        self._lock = threading.RLock()

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def history(self) -> HistoryManager:
        return self._history

    @property
    def autosave(self) -> AutoSave | None:
        return self._autosave

    @property
    def rules(self) -> list[Rule]:
        """A copy of the live rules."""
        with self._lock:
            return clone_rules(self._rules)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    # --- editing --------------------------------------------------------------

    def apply(self, rules: Iterable[Rule], operation: Operation | None = None) -> None:
        """Replace the live rules with *rules* and record the edit."""
        with self._lock:
            self._replace(rules)
            self._history.save_state(self._rules, operation)
            self._persist()

    def load_css(self, css_text: str) -> list[Rule]:
        """Parse *css_text* into the live rules; returns a copy of them."""
        rules = parse_css(css_text)
        with self._lock:
            self.apply(rules)
            return self.rules

    def export_css(self) -> str:
        with self._lock:
            return format_rules(self._rules)

    def undo(self) -> bool:
        with self._lock:
            restored = self._history.undo()
            if restored is None:
                return False
            self._replace(restored)
            self._persist()
            return True

    def redo(self) -> bool:
        with self._lock:
            restored = self._history.redo()
            if restored is None:
                return False
            self._replace(restored)
            self._persist()
            return True

    def restore(self) -> bool:
        """Load autosaved rules and start a fresh history from them.

        Returns False when there is no autosave or nothing usable is stored.
        """
        if self._autosave is None:
            return False
        loaded = self._autosave.load()
        if loaded is None:
            return False
        with self._lock:
            self._replace(loaded)
            self._history.clear()
            self._history.save_state(self._rules)
        logger.info("Restored %d rule(s) from autosave", len(self._rules))
        return True

    # --- internals ------------------------------------------------------------

    def _replace(self, rules: Iterable[Rule]) -> None:
        self._rules = clone_rules(rules)
        self._bus.emit(RulesReplaced(count=len(self._rules)))

    def _persist(self) -> None:
        if self._autosave is not None:
            self._autosave.save(self._rules)
