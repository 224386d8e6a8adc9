"""Persistence adapter: debounced save/load of rule sequences to a key-value store."""
from __future__ import annotations

from cssedit.persistence.autosave import AutoSave, SaveStatus, StorageInfo
from cssedit.persistence.debounce import Debouncer
from cssedit.persistence.errors import QuotaExceededError, StorageError, StorageUnavailableError
from cssedit.persistence.store import KeyValueStore, MemoryStore, SqliteStore

__all__ = [
    "AutoSave",
    "SaveStatus",
    "StorageInfo",
    "Debouncer",
    "StorageError",
    "StorageUnavailableError",
    "QuotaExceededError",
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
]
