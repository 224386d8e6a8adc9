"""Key-value stores holding serialised editor state."""

from __future__ import annotations

import sqlite3
import threading
from typing import Protocol, runtime_checkable

from cssedit.persistence.errors import QuotaExceededError, StorageUnavailableError

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal string-to-string store used by :class:`AutoSave`.

    Implementations raise :class:`StorageError` subclasses on failure.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def items(self) -> list[tuple[str, str]]: ...


class MemoryStore:
    """In-process store with an optional size quota (in characters)."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._quota = quota_bytes
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            if self._quota is not None:
                used = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
                requested = used + len(key) + len(value)
                if requested > self._quota:
                    raise QuotaExceededError(
                        f"Writing {key!r} needs {requested} bytes, quota is {self._quota}",
                        requested=requested,
                        quota=self._quota,
                    )
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def items(self) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._data.items())


class SqliteStore:
    """Store backed by a single SQLite table.

    The connection is shared with the autosave timer thread, so
    ``check_same_thread`` is off and every access goes through one lock.
    """

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._lock = threading.Lock()
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(path, check_same_thread=False)
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(SCHEMA)
        except sqlite3.Error as exc:
            raise StorageUnavailableError(f"Cannot open {path!r}: {exc}") from exc

    @property
    def path(self) -> str:
        return self._path

    def get(self, key: str) -> str | None:
        row = self._run("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        self._run(
            "INSERT INTO kv_store (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
            commit=True,
        )

    def remove(self, key: str) -> None:
        self._run("DELETE FROM kv_store WHERE key = ?", (key,), commit=True)

    def items(self) -> list[tuple[str, str]]:
        rows = self._run("SELECT key, value FROM kv_store ORDER BY key").fetchall()
        return [(k, v) for k, v in rows]

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _run(self, sql: str, params: tuple = (), commit: bool = False) -> sqlite3.Cursor:
        with self._lock:
            if self._conn is None:
                raise StorageUnavailableError(f"Store {self._path!r} is closed")
            try:
                cursor = self._conn.execute(sql, params)
                if commit:
                    self._conn.commit()
                return cursor
            except sqlite3.OperationalError as exc:
                # SQLITE_FULL surfaces as "database or disk is full"
                if "full" in str(exc).lower():
                    raise QuotaExceededError(str(exc)) from exc
                raise StorageUnavailableError(str(exc)) from exc
            except sqlite3.Error as exc:
                raise StorageUnavailableError(str(exc)) from exc
