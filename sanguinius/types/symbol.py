from __future__ import annotations


class SymbolTable:
    """Process-wide registry guaranteeing one Symbol object per spelling.

    Symbols are created lazily on first use and never removed, so identity
    comparison (`is`) is a valid equality test for them.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = object.__new__(Symbol)
            symbol.id = name
            # setdefault keeps the first writer's object if two callers race
            symbol = self._symbols.setdefault(name, symbol)
        return symbol

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)


_table = SymbolTable()


def symbol_table() -> SymbolTable:
    return _table


class Symbol:
    """An interned name. `Symbol("x") is Symbol("x")` always holds."""

    __slots__ = ("id",)

    def __new__(cls, name: str) -> Symbol:
        return _table.intern(name)

    # Equality and hashing are inherited from object: identity based.

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Symbols the reader and evaluator compare against on every form
QUOTE = Symbol("quote")
DEFINE = Symbol("define")
SET = Symbol("set!")
IF = Symbol("if")
LAMBDA = Symbol("lambda")
OK = Symbol("ok")
