"""Cons cells and the list helpers built on them.

Lists are right-nested chains of `Pair` terminated by `Nil`. A chain ending in
anything else is an improper list. Pairs are never mutated after construction,
so structure can be shared freely between lists.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from sanguinius import LispValue
from sanguinius.errors import SanguiniusTypeError
from sanguinius.types.nil import Nil


class Pair:
    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue):
        self.first = first
        self.rest = rest

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __repr__(self):
        from sanguinius.printer import to_string
        return f"Pair<{to_string(self)}>"


def cons(first: LispValue, rest: LispValue) -> Pair:
    return Pair(first, rest)


def car(value: LispValue) -> LispValue:
    if isinstance(value, Pair):
        return value.first
    raise SanguiniusTypeError(f"car: expected a pair, got {value!r}")


def cdr(value: LispValue) -> LispValue:
    if isinstance(value, Pair):
        return value.rest
    raise SanguiniusTypeError(f"cdr: expected a pair, got {value!r}")


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from `items`, ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list; raise on an improper tail."""
    while isinstance(value, Pair):
        yield value.first
        value = value.rest
    if value is not Nil:
        raise SanguiniusTypeError(f"expected a proper list, found tail {value!r}")


def list_length(value: LispValue) -> int | None:
    """Length of a proper list, or None if `value` is not one."""
    n = 0
    while isinstance(value, Pair):
        n += 1
        value = value.rest
    return n if value is Nil else None
