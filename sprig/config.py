from __future__ import annotations
import os


DEFAULT_MAX_DEPTH = 400
DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    """Maximum nesting of closure calls before a runtime error is reported."""
    return int_from_env('SPRIG_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    return os.environ.get('SPRIG_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
