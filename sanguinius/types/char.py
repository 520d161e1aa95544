from __future__ import annotations

SPACE = 32
NEWLINE = 10

# Highest code point a character literal may hold
MAX_CODE_POINT = 0x10FFFF

# UTF-16 surrogates are not characters and cannot be encoded for output
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def is_surrogate(code: int) -> bool:
    return SURROGATE_MIN <= code <= SURROGATE_MAX


class Char:
    """A character value holding a single code point."""

    __slots__ = ("code",)

    def __init__(self, code: int):
        self.code = code

    @property
    def char(self) -> str:
        return chr(self.code)

    def __eq__(self, other) -> bool:
        return isinstance(other, Char) and self.code == other.code

    def __hash__(self) -> int:
        return hash(("char", self.code))

    def __repr__(self):
        return f"Char({self.char!r})"
