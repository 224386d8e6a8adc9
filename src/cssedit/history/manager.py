"""Linear undo/redo history over rule sequences.

The log is a flat list with a cursor. Saving after an undo discards the
redo branch; the oldest entries are evicted once the log exceeds its bound.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from cssedit.events.bus import EventBus
from cssedit.events.types import HistoryChanged
from cssedit.history.snapshot import HistorySnapshot
from cssedit.model.operation import Operation
from cssedit.model.rule import Rule

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY_SIZE = 50


class HistoryManager:
    """Bounded snapshot history with linear undo/redo.

    Every snapshot owns a deep copy of the rules it was given, and every read
    returns a fresh deep copy, so callers may mutate what they pass in or get
    back without corrupting the log. Check-and-move on the cursor happens
    under one lock, so concurrent callers can never push it out of range.

    Usage::

        history = HistoryManager(max_history_size=50)
        history.save_state(rules)
        ...
        history.save_state(edited_rules, AddRule(rule=new_rule))
        previous = history.undo()   # list[Rule] or None
        following = history.redo()  # list[Rule] or None
    """

    def __init__(
        self,
        max_history_size: int = DEFAULT_MAX_HISTORY_SIZE,
        bus: EventBus | None = None,
    ) -> None:
        if max_history_size < 1:
            raise ValueError(f"max_history_size must be at least 1, got {max_history_size}")
        self._max_history_size = max_history_size
        self._bus = bus
        self._lock = threading.RLock()
        self._log: list[HistorySnapshot] = []
        self._current_index = -1
        self._can_undo = False
        self._can_redo = False

    # --- state flags ----------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        with self._lock:
            return self._can_undo

    @property
    def can_redo(self) -> bool:
        with self._lock:
            return self._can_redo

    @property
    def current_index(self) -> int:
        with self._lock:
            return self._current_index

    @property
    def max_history_size(self) -> int:
        return self._max_history_size

    def size(self) -> int:
        """Return the number of snapshots currently held."""
        with self._lock:
            return len(self._log)

    def __len__(self) -> int:
        return self.size()

    # --- mutation -------------------------------------------------------------

    def save_state(self, rules: Iterable[Rule], operation: Operation | None = None) -> None:
        """Record *rules* as the newest state.

        A save identical to the current snapshot is ignored. Otherwise any
        redo branch is dropped before the new snapshot is appended.
        """
        snapshot = HistorySnapshot.capture(rules, operation)

        with self._lock:
            if self._log and self._log[self._current_index].same_rules(snapshot.rules):
                logger.debug("Skipping duplicate history state at index %d", self._current_index)
                return

            del self._log[self._current_index + 1:]
            self._log.append(snapshot)
            self._current_index = len(self._log) - 1

            excess = len(self._log) - self._max_history_size
            if excess > 0:
                del self._log[:excess]
                self._current_index -= excess
                logger.debug("Evicted %d oldest history state(s)", excess)

            logger.debug(
                "Saved history state %d/%d (operation=%s)",
                self._current_index + 1,
                len(self._log),
                operation.kind if operation is not None else None,
            )
            self._changed()

    def undo(self) -> list[Rule] | None:
        """Step back one snapshot; returns None when there is nothing to undo."""
        with self._lock:
            if not self._can_undo:
                return None
            self._current_index -= 1
            self._changed()
            return self._log[self._current_index].restore()

    def redo(self) -> list[Rule] | None:
        """Step forward one snapshot; returns None when there is nothing to redo."""
        with self._lock:
            if not self._can_redo:
                return None
            self._current_index += 1
            self._changed()
            return self._log[self._current_index].restore()

    def clear(self) -> None:
        """Drop every snapshot."""
        with self._lock:
            self._log.clear()
            self._current_index = -1
            self._changed()

    # --- inspection -----------------------------------------------------------

    def current(self) -> list[Rule] | None:
        """Return a copy of the rules at the cursor, or None if empty."""
        with self._lock:
            if self._current_index < 0:
                return None
            return self._log[self._current_index].restore()

    @property
    def current_operation(self) -> Operation | None:
        with self._lock:
            if self._current_index < 0:
                return None
            return self._log[self._current_index].operation

    # --- internals ------------------------------------------------------------

    def _changed(self) -> None:
        # caller holds self._lock
        self._can_undo = self._current_index > 0
        self._can_redo = self._current_index < len(self._log) - 1
        if self._bus is not None:
            self._bus.emit(
                HistoryChanged(
                    can_undo=self._can_undo,
                    can_redo=self._can_redo,
                    size=len(self._log),
                    current_index=self._current_index,
                )
            )

    def __repr__(self) -> str:
        return (
            f"HistoryManager(size={len(self._log)}, current_index={self._current_index}, "
            f"max_history_size={self._max_history_size})"
        )
