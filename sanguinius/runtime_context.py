"""Process-wide interpreter state.

The global environment is created on first use and lives for the rest of the
process. It accumulates definitions across every form evaluated in it and is
never reset. The symbol table is likewise shared and append-only.
"""

from __future__ import annotations

import logging
from typing import Optional

from sanguinius.builtin.env_builtin import register
from sanguinius.types.environment import Environment, EMPTY
from sanguinius.types.nil import Nil
from sanguinius.types.symbol import symbol_table

logger = logging.getLogger(__name__)

_global_env: Optional[Environment] = None

__all__ = ["get_global_environment", "make_global_environment", "symbol_table", "EMPTY"]


def make_global_environment() -> Environment:
    """Build a fresh top-level environment, a child of EMPTY holding every primitive."""
    env = Environment.extend(Nil, Nil, EMPTY)
    register(env)
    return env


def get_global_environment() -> Environment:
    global _global_env
    if _global_env is None:
        _global_env = make_global_environment()
        logger.debug("global environment initialised with %d primitives", len(_global_env.vars))
    return _global_env
