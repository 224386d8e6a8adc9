"""Debounced autosave of the rule sequence to a key-value store.

Payloads are written as a versioned envelope::

    {"version": "1.0", "timestamp": "<iso8601>", "cssRules": [...]}

and a bare JSON array of rules (the legacy format) is still accepted on load.
Storage failures never propagate: they are turned into an ``error`` status
with a human-readable message.
"""

from __future__ import annotations

import json
import logging
import math
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Iterable

from cssedit.events.bus import EventBus
from cssedit.events.types import SaveStatusChanged
from cssedit.model.rule import Rule, clone_rules, rules_from_dicts, rules_to_dicts
from cssedit.persistence.debounce import Debouncer
from cssedit.persistence.errors import QuotaExceededError, StorageError
from cssedit.persistence.store import KeyValueStore

logger = logging.getLogger(__name__)

ENVELOPE_VERSION = "1.0"
ESTIMATED_LIMIT_BYTES = 5 * 1024 * 1024
_PROBE_KEY = "__storage_test__"

UNAVAILABLE_MESSAGE = "Local storage is not available"
QUOTA_MESSAGE = "Storage quota exceeded. Please clear some data."
LOAD_FAILED_MESSAGE = "Failed to load saved data"
CLEAR_FAILED_MESSAGE = "Failed to clear saved data"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class SaveStatus(StrEnum):
    IDLE = "idle"
    SAVING = "saving"
    SAVED = "saved"
    ERROR = "error"


@dataclass(frozen=True)
class StorageInfo:
    """Approximate store usage, in kilobytes."""

    used_kb: int
    available_kb: int


class AutoSave:
    """Save and restore rule sequences under a single store key."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        debounce_ms: int = 1000,
        saved_reset_ms: int = 2000,
        bus: EventBus | None = None,
    ) -> None:
        self._store = store
        self._key = key
        self._bus = bus
        self._lock = threading.Lock()
        self._status = SaveStatus.IDLE
        self._last_saved: datetime | None = None
        self._error_message = ""
        self._save_timer = Debouncer(debounce_ms / 1000.0)
        self._reset_timer = Debouncer(saved_reset_ms / 1000.0)
        self._available = self._check_available()

    # --- state ----------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def status(self) -> SaveStatus:
        with self._lock:
            return self._status

    @property
    def last_saved(self) -> datetime | None:
        with self._lock:
            return self._last_saved

    @property
    def error_message(self) -> str:
        with self._lock:
            return self._error_message

    @property
    def is_available(self) -> bool:
        return self._available

    @property
    def pending(self) -> bool:
        """True while a debounced save is waiting to run."""
        return self._save_timer.pending

    # --- saving ---------------------------------------------------------------

    def save(self, rules: Iterable[Rule]) -> None:
        """Schedule a save of *rules*, superseding any save still waiting."""
        if not self._available:
            self._set_status(SaveStatus.ERROR, UNAVAILABLE_MESSAGE)
            return
        self._save_timer.call(self._write, clone_rules(rules))

    def save_now(self, rules: Iterable[Rule]) -> bool:
        """Write *rules* immediately, dropping any pending save. Returns success."""
        self._save_timer.cancel()
        if not self._available:
            self._set_status(SaveStatus.ERROR, UNAVAILABLE_MESSAGE)
            return False
        return self._write(clone_rules(rules))

    def flush(self) -> bool:
        """Run a pending save right away; returns True if one was pending."""
        return self._save_timer.flush()

    def close(self) -> None:
        """Cancel every pending timer without writing."""
        self._save_timer.cancel()
        self._reset_timer.cancel()

    # --- loading / clearing ---------------------------------------------------

    def load(self) -> list[Rule] | None:
        """Return the stored rules, or None when nothing usable is stored."""
        if not self._available:
            return None
        try:
            raw = self._store.get(self._key)
            if not raw:
                return None
            data = json.loads(raw)
            if isinstance(data, list):
                return rules_from_dicts(data)
            if data is None:
                raise TypeError("stored payload is null")
            if isinstance(data, dict) and isinstance(data.get("cssRules"), list):
                return rules_from_dicts(data["cssRules"])
            return None
        except (StorageError, ValueError, KeyError, TypeError):
            logger.error("Failed to load auto-saved data for key %r", self._key, exc_info=True)
            with self._lock:
                self._error_message = LOAD_FAILED_MESSAGE
            return None

    def clear(self) -> None:
        """Remove the stored rules and reset the save status."""
        if not self._available:
            return
        self._save_timer.cancel()
        self._reset_timer.cancel()
        try:
            self._store.remove(self._key)
        except StorageError:
            logger.error("Failed to clear saved data for key %r", self._key, exc_info=True)
            with self._lock:
                self._error_message = CLEAR_FAILED_MESSAGE
            return
        with self._lock:
            self._last_saved = None
        self._set_status(SaveStatus.IDLE, "")

    def storage_info(self) -> StorageInfo:
        """Estimate how much of the store is used, against a 5 MiB budget."""
        if not self._available:
            return StorageInfo(used_kb=0, available_kb=0)
        try:
            used = sum(len(k) + len(v) for k, v in self._store.items())
        except StorageError:
            logger.error("Failed to get storage info", exc_info=True)
            return StorageInfo(used_kb=0, available_kb=0)
        available = max(0, ESTIMATED_LIMIT_BYTES - used)
        return StorageInfo(
            used_kb=_round_half_up(used / 1024),
            available_kb=_round_half_up(available / 1024),
        )

    # --- internals ------------------------------------------------------------

    def _check_available(self) -> bool:
        try:
            self._store.set(_PROBE_KEY, "test")
            self._store.remove(_PROBE_KEY)
            return True
        except StorageError as exc:
            logger.warning("Storage is not available: %s", exc)
            return False

    def _write(self, rules: list[Rule]) -> bool:
        self._set_status(SaveStatus.SAVING, "")
        payload = json.dumps(
            {
                "version": ENVELOPE_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "cssRules": rules_to_dicts(rules),
            }
        )
        try:
            self._store.set(self._key, payload)
        except QuotaExceededError:
            logger.error("Auto-save failed: quota exceeded for key %r", self._key, exc_info=True)
            self._set_status(SaveStatus.ERROR, QUOTA_MESSAGE)
            return False
        except StorageError as exc:
            logger.error("Auto-save failed for key %r", self._key, exc_info=True)
            self._set_status(SaveStatus.ERROR, f"Save failed: {exc}")
            return False

        with self._lock:
            self._last_saved = datetime.now(timezone.utc)
        self._set_status(SaveStatus.SAVED, "")
        logger.debug("Auto-saved %d rule(s) under %r", len(rules), self._key)
        self._reset_timer.call(self._reset_if_saved)
        return True

    def _reset_if_saved(self) -> None:
        with self._lock:
            if self._status is not SaveStatus.SAVED:
                return
        self._set_status(SaveStatus.IDLE, "")

    def _set_status(self, status: SaveStatus, message: str) -> None:
        with self._lock:
            self._status = status
            self._error_message = message
        if self._bus is not None:
            self._bus.emit(SaveStatusChanged(status=status.value, error_message=message))
