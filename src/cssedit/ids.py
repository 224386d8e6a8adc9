"""Rule identifier generation."""

from __future__ import annotations

import random
import time

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    chars: list[str] = []
    while number:
        number, rem = divmod(number, 36)
        chars.append(_DIGITS[rem])
    return "".join(reversed(chars))


def generate_id() -> str:
    """Return a short, time-ordered identifier for a rule.

    The id is the base-36 epoch time in milliseconds followed by a base-36
    random fragment. Collisions within one editing session are practically
    impossible, but the value is not cryptographically unique.
    """
    millis = time.time_ns() // 1_000_000
    return _to_base36(millis) + _to_base36(random.getrandbits(53))
