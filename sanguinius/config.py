from __future__ import annotations
import logging
import os

_DEFAULT_PROMPT = "> "
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_prompt() -> str:
    return os.environ.get("SANGUINIUS_PROMPT", _DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    limit = int_from_env("SANGUINIUS_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT)
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def get_log_level() -> int:
    name = os.environ.get("SANGUINIUS_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
