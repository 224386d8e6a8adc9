from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping

ENV_PREFIX = "CSSEDIT_"


@dataclass(frozen=True)
class EditorConfig:
    max_history_size: int = 50
    storage_key: str = "cssRules"
    debounce_ms: int = 1000
    saved_reset_ms: int = 2000
    db_path: str = ":memory:"
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorConfig:
        """Build a config from ``CSSEDIT_*`` variables, falling back to defaults.

        Raises ValueError when an integer setting is not a valid integer.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            name = ENV_PREFIX + f.name.upper()
            raw = env.get(name)
            if raw is None or raw == "":
                continue
            if f.type in ("int", int):
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ValueError(f"{name} must be an integer, got {raw!r}") from None
            else:
                values[f.name] = raw
        return cls(**values)
