from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_MAX_DEPTH = 100
_DEFAULT_PROMPT = ">>> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Maximum number of nested function calls before evaluation is aborted."""
    return int_from_env('MINILISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    return os.environ.get('MINILISP_PROMPT') or _DEFAULT_PROMPT


def get_log_level() -> int:
    raw = (os.environ.get('MINILISP_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
