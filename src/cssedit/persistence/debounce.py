"""Cancel-and-replace timer used to coalesce bursts of saves."""

from __future__ import annotations

import threading
from typing import Any, Callable


class Debouncer:
    """Run only the latest of a burst of calls, once *delay_seconds* of quiet pass.

    Each :meth:`call` cancels the pending timer and starts a new one under a
    fresh token. A timer that fires after being superseded sees a stale token
    and does nothing, so cancellation is reliable even when the old timer
    thread has already woken up.
    """

    def __init__(self, delay_seconds: float) -> None:
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self._delay = delay_seconds
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._token = 0
        self._pending: tuple[Callable[..., Any], tuple[Any, ...]] | None = None

    @property
    def delay_seconds(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def call(self, fn: Callable[..., Any], *args: Any) -> int:
        """Schedule ``fn(*args)``, replacing any pending call. Returns the new token."""
        with self._lock:
            self._stop_timer()
            self._token += 1
            token = self._token
            self._pending = (fn, args)
            timer = threading.Timer(self._delay, self._fire, args=(token,))
            timer.daemon = True
            self._timer = timer
        timer.start()
        return token

    def cancel(self) -> bool:
        """Drop the pending call; returns True if there was one."""
        with self._lock:
            had_pending = self._pending is not None
            self._reset()
        return had_pending

    def flush(self) -> bool:
        """Run the pending call now, on the caller's thread; returns True if one ran."""
        with self._lock:
            if self._pending is None:
                return False
            fn, args = self._pending
            self._reset()
        fn(*args)
        return True

    # --- internals ------------------------------------------------------------

    def _fire(self, token: int) -> None:
        with self._lock:
            if token != self._token or self._pending is None:
                return
            fn, args = self._pending
            self._pending = None
            self._timer = None
        fn(*args)

    def _reset(self) -> None:
        self._stop_timer()
        self._pending = None
        self._token += 1

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
