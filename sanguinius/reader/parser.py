"""
  Sanguinius Reader

Character-level recursive-descent reader producing runtime values directly:

    - integers          -> int (signed 64-bit)
    - #t / #f           -> TRUE / FALSE
    - #\\c, #\\space,
      #\\newline        -> Char
    - "..."             -> String (a fresh object per literal)
    - symbols           -> interned Symbol
    - (a b . c)         -> chains of Pair, ending in Nil or the dotted tail
    - 'x                -> (quote x)

Whitespace and `;` line comments may appear between any two data. Numbers,
character literals, booleans and the dot of a dotted pair must be followed by
a delimiter: whitespace, end of input, a parenthesis, a double quote or `;`.

Malformed input raises SanguiniusReadError; the reader never returns a
partial datum.
"""

from __future__ import annotations

from typing import Iterator, TextIO

from sanguinius import SExpression
from sanguinius.errors import SanguiniusReadError
from sanguinius.reader.char_stream import CharStream
from sanguinius.types.boolean import TRUE, FALSE
from sanguinius.types.char import Char, NEWLINE, SPACE
from sanguinius.types.fixnum import fits_fixnum
from sanguinius.types.pair import make_list
from sanguinius.types.string import String
from sanguinius.types.symbol import Symbol, QUOTE


DIGITS = frozenset("0123456789")
DELIMITERS = frozenset('()";')
INITIAL_PUNCTUATION = frozenset("*/<>=?!")
SIGNS = frozenset("+-")

NAMED_CHARS: dict[str, int] = {
    "space": SPACE,
    "newline": NEWLINE,
}


def is_delimiter(c: str) -> bool:
    return c == "" or c.isspace() or c in DELIMITERS


def is_initial(c: str) -> bool:
    return c.isalpha() or c in INITIAL_PUNCTUATION


class Reader:
    def __init__(self, source: str | TextIO | CharStream):
        self.stream = source if isinstance(source, CharStream) else CharStream(source)

    def error(self, message: str) -> SanguiniusReadError:
        return SanguiniusReadError(message, self.stream.position)

    def read(self) -> SExpression | None:
        """Read the next datum, or return None at end of input."""
        self.skip_atmosphere()
        c = self.stream.next()
        if c == "":
            return None
        try:
            return self._read_datum(c)
        except RecursionError:
            raise self.error("datum nested too deeply") from None

    def read_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.read()
            if expr is None:
                break
            yield expr

    def skip_atmosphere(self) -> None:
        """Skip whitespace and comments."""
        stream = self.stream
        while True:
            c = stream.next()
            if c.isspace():
                continue
            if c == ";":
                while c and c != "\n":
                    c = stream.next()
                continue
            stream.unread(c)
            return

    # ------------------------
    # Datum dispatch
    # ------------------------
    def _read_datum(self, c: str) -> SExpression:
        stream = self.stream
        if c == "#":
            return self._read_hash()
        if c in DIGITS or (c == "-" and stream.peek() in DIGITS):
            return self._read_number(c)
        if c == '"':
            return self._read_string()
        if is_initial(c) or (c in SIGNS and is_delimiter(stream.peek())):
            return self._read_symbol(c)
        if c == "(":
            return self._read_list()
        if c == "'":
            return make_list([QUOTE, self._read_required("quoted datum")])
        raise self.error(f"bad input. unexpected {c!r}")

    def _read_required(self, context: str) -> SExpression:
        self.skip_atmosphere()
        c = self.stream.next()
        if c == "":
            raise self.error(f"unexpected end of input in {context}")
        return self._read_datum(c)

    def _expect_delimiter(self, what: str) -> None:
        if not is_delimiter(self.stream.peek()):
            raise self.error(f"{what} not followed by delimiter")

    # ------------------------
    # Atoms
    # ------------------------
    def _read_hash(self) -> SExpression:
        c = self.stream.next()
        if c == "t":
            self._expect_delimiter("boolean literal")
            return TRUE
        if c == "f":
            self._expect_delimiter("boolean literal")
            return FALSE
        if c == "\\":
            return self._read_char()
        raise self.error(f"unknown boolean or character literal #{c}")

    def _read_char(self) -> Char:
        stream = self.stream
        c = stream.next()
        if c == "":
            raise self.error("incomplete character literal")
        for name, code in NAMED_CHARS.items():
            # A named literal is recognised from its first two letters
            if c == name[0] and stream.peek() == name[1]:
                for expected in name[1:]:
                    got = stream.next()
                    if got != expected:
                        raise self.error(f"unexpected character {got!r} in #\\{name}")
                self._expect_delimiter("character literal")
                return Char(code)
        self._expect_delimiter("character literal")
        return Char(ord(c))

    def _read_number(self, c: str) -> int:
        stream = self.stream
        sign = 1
        if c == "-":
            sign = -1
            c = stream.next()
        num = 0
        while c in DIGITS:
            num = num * 10 + ord(c) - ord("0")
            c = stream.next()
        stream.unread(c)
        if not is_delimiter(c):
            raise self.error("number not followed by delimiter")
        num *= sign
        if not fits_fixnum(num):
            raise self.error(f"integer literal {num} out of fixnum range")
        return num

    def _read_string(self) -> String:
        stream = self.stream
        chars: list[str] = []
        while True:
            c = stream.next()
            if c == '"':
                break
            if c == "\\":
                c = stream.next()
                if c == "n":
                    c = "\n"
            if c == "":
                raise self.error("non-terminated string literal")
            chars.append(c)
        return String("".join(chars))

    def _read_symbol(self, c: str) -> Symbol:
        stream = self.stream
        chars: list[str] = []
        while is_initial(c) or c in DIGITS or c in SIGNS:
            chars.append(c)
            c = stream.next()
        stream.unread(c)
        return Symbol("".join(chars))

    # ------------------------
    # Lists
    # ------------------------
    def _read_list(self) -> SExpression:
        stream = self.stream
        items: list[SExpression] = []
        while True:
            self.skip_atmosphere()
            c = stream.next()
            if c == "":
                raise self.error("missing closing parenthesis")
            if c == ")":
                return make_list(items)
            if c == ".":
                if not items:
                    raise self.error("dot without a preceding datum")
                if not is_delimiter(stream.peek()):
                    raise self.error("dot not followed by delimiter")
                tail = self._read_required("dotted pair")
                self.skip_atmosphere()
                if stream.next() != ")":
                    raise self.error("expected ')' after the tail of a dotted pair")
                return make_list(items, tail)
            items.append(self._read_datum(c))


def read(source: str | TextIO | CharStream) -> SExpression | None:
    """Read a single datum from `source`; None if it holds only atmosphere."""
    return Reader(source).read()


def read_all(source: str | TextIO | CharStream) -> list[SExpression]:
    return list(Reader(source).read_all())
