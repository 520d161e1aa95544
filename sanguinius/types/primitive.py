from __future__ import annotations

from typing import Callable

from sanguinius import LispValue

PrimitiveFn = Callable[[LispValue], LispValue]


class Primitive:
    """A built-in procedure backed by a Python function.

    The function receives the evaluated arguments as a list value (a Pair
    chain, or Nil for no arguments) and returns a value.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: LispValue) -> LispValue:
        return self.fn(args)

    def __repr__(self):
        return f"<Primitive {self.name}>"
