from __future__ import annotations


class NilType:
    """The empty list. Only one instance ever exists."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __reduce__(self):
        return NilType, ()


Nil = NilType()
