import sys

import pytest

from sanguinius.interpreter import Interpreter
from sanguinius.runtime_context import make_global_environment


@pytest.fixture
def env():
    """Return a fresh top-level environment (primitives only) for each test."""
    return make_global_environment()


@pytest.fixture
def interp():
    return Interpreter(isolated=True)


@pytest.fixture
def run(interp):
    """Evaluate source text and return the written form of the last value."""
    return interp.eval_to_string


@pytest.fixture
def shallow_stack():
    """Run with a recursion limit far below the loop counts and nesting depths used in tests."""
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    yield
    sys.setrecursionlimit(old)
