from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# ceilings for a single matching call. the matcher has no memoization, so
# alternation-heavy patterns can blow up; these stop it with an error
# instead of a hang or a RecursionError.

DEFAULT_MAX_STEPS = 1_000_000
DEFAULT_MAX_DEPTH = 256

ENV_MAX_STEPS = "MINIREX_MAX_STEPS"
ENV_MAX_DEPTH = "MINIREX_MAX_DEPTH"

_DISABLED = {"0", "none"}


@dataclass(frozen=True)
class EngineConfig:
    max_steps: Optional[int] = DEFAULT_MAX_STEPS
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        for name in ("max_steps", "max_depth"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive or None, got {value}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        return cls(
            max_steps=_parse_limit(env, ENV_MAX_STEPS, DEFAULT_MAX_STEPS),
            max_depth=_parse_limit(env, ENV_MAX_DEPTH, DEFAULT_MAX_DEPTH),
        )


def _parse_limit(env: Mapping[str, str], key: str, default: int) -> Optional[int]:
    raw = (env.get(key) or "").strip().lower()
    if not raw:
        # unset and empty both mean the default
        return default
    if raw in _DISABLED:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
