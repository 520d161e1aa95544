from __future__ import annotations


class Boolean:
    """Runtime boolean. `TRUE` and `FALSE` are the only instances.

    Python's bool is deliberately not used as a runtime value: it is an int
    subclass and would be mistaken for a fixnum.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __bool__(self):
        return self.value

    def __repr__(self):
        return "#t" if self.value else "#f"


TRUE = Boolean(True)
FALSE = Boolean(False)


def boolean(flag: object) -> Boolean:
    """Map a Python truth value onto the TRUE/FALSE singletons."""
    return TRUE if flag else FALSE
