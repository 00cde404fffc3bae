from __future__ import annotations
import os
from typing import Optional

from scheval.errors import SchevalConfigError

STRATEGIES = ("eager", "lazy")

# Defaults
_DEFAULT_STRATEGY = "eager"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_strategy_name(default: str = _DEFAULT_STRATEGY) -> str:
    name = value_from_env('SCHEVAL_STRATEGY', default).lower()
    if name not in STRATEGIES:
        raise SchevalConfigError(
            f"SCHEVAL_STRATEGY must be one of {', '.join(STRATEGIES)}, got {name!r}"
        )
    return name


def get_log_level() -> str:
    return value_from_env('SCHEVAL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    """Host recursion limit requested by the environment, or None to keep the default."""
    raw = value_from_env('SCHEVAL_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise SchevalConfigError(f"SCHEVAL_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise SchevalConfigError(f"SCHEVAL_RECURSION_LIMIT must be positive, got {limit}")
    return limit
