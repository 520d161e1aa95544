"""External representation of runtime values.

The output is read-compatible for every datum the reader can produce:
writing a value and reading the text back yields an equivalent value.
Procedures print as `#<procedure>`, which is not readable.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from sanguinius import LispValue
from sanguinius.errors import SanguiniusTypeError, SanguiniusWriteError
from sanguinius.types.boolean import Boolean, TRUE
from sanguinius.types.char import Char, NEWLINE, SPACE
from sanguinius.types.lambda_fn import Lambda
from sanguinius.types.nil import NilType, Nil
from sanguinius.types.pair import Pair
from sanguinius.types.primitive import Primitive
from sanguinius.types.symbol import Symbol

CHAR_NAMES = {NEWLINE: "newline", SPACE: "space"}

STRING_ESCAPES = {"\n": "\\n", "\\": "\\\\", '"': '\\"'}


def escape_string(s: str) -> str:
    return "".join(STRING_ESCAPES.get(c, c) for c in s)


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case Boolean():
            buffer.write("#t" if value is TRUE else "#f")
        case int():
            buffer.write(str(value))
        case Char(code=code):
            buffer.write("#\\")
            buffer.write(CHAR_NAMES.get(code) or chr(code))
        case str():
            buffer.write('"')
            buffer.write(escape_string(value))
            buffer.write('"')
        case NilType():
            buffer.write("()")
        case Pair():
            buffer.write("(")
            _write(value.first, buffer)
            rest = value.rest
            while isinstance(rest, Pair):
                buffer.write(" ")
                _write(rest.first, buffer)
                rest = rest.rest
            if rest is not Nil:
                buffer.write(" . ")
                _write(rest, buffer)
            buffer.write(")")
        case Symbol():
            buffer.write(value.id)
        case Primitive() | Lambda():
            buffer.write("#<procedure>")
        case _:
            raise SanguiniusTypeError(f"cannot write host object {value!r}")


def to_string(value: LispValue) -> str:
    """Return the external representation of `value`."""
    with StringIO() as buffer:
        try:
            _write(value, buffer)
        except RecursionError:
            raise SanguiniusWriteError("value nested too deeply to write") from None
        return buffer.getvalue()


def write(value: LispValue, out: TextIO | None = None) -> None:
    """Write the external representation of `value` to `out` (stdout by default)."""
    (out or sys.stdout).write(to_string(value))
