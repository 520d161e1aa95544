"""Built-in procedures for the Sanguinius global environment.

Each primitive receives the evaluated argument list (a Pair chain, or Nil)
and returns a value. Primitives look at as many leading arguments as they
need; missing arguments raise SanguiniusArityError and arguments of the
wrong type raise SanguiniusTypeError. Surplus arguments are ignored.
"""
from __future__ import annotations

import re
from typing import Callable

from sanguinius import LispValue
from sanguinius.errors import SanguiniusArityError, SanguiniusTypeError, SanguiniusValueError
from sanguinius.types.boolean import Boolean, TRUE, FALSE, boolean
from sanguinius.types.char import Char, MAX_CODE_POINT, is_surrogate
from sanguinius.types.environment import Environment
from sanguinius.types.fixnum import is_fixnum, fits_fixnum
from sanguinius.types.nil import Nil
from sanguinius.types.pair import Pair, car as pair_car, cdr as pair_cdr
from sanguinius.types.primitive import Primitive
from sanguinius.types.string import String
from sanguinius.types.symbol import Symbol
from sanguinius.types import is_procedure as procedure_p

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def nth_arg(name: str, args: LispValue, index: int) -> LispValue:
    cur = args
    for _ in range(index):
        if not isinstance(cur, Pair):
            break
        cur = cur.rest
    if not isinstance(cur, Pair):
        raise SanguiniusArityError(f"{name}: expected at least {index + 1} argument(s)")
    return cur.first


def fixnum_arg(name: str, value: LispValue) -> int:
    if not is_fixnum(value):
        raise SanguiniusTypeError(f"{name}: expected an integer, got {value!r}")
    return value


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(test: Callable[[LispValue], bool], name: str) -> Callable[[LispValue], Boolean]:
    def predicate(args: LispValue) -> Boolean:
        return boolean(test(nth_arg(name, args, 0)))
    predicate.__name__ = name
    return predicate


is_null = _predicate(lambda v: v is Nil, "null?")
is_boolean = _predicate(lambda v: isinstance(v, Boolean), "boolean?")
is_symbol = _predicate(lambda v: isinstance(v, Symbol), "symbol?")
is_integer = _predicate(is_fixnum, "integer?")
is_character = _predicate(lambda v: isinstance(v, Char), "character?")
is_string = _predicate(lambda v: isinstance(v, str), "string?")
is_pair = _predicate(lambda v: isinstance(v, Pair), "pair?")
is_procedure = _predicate(procedure_p, "procedure?")


# -------------------------------
# Conversions
# -------------------------------
def char_to_integer(args: LispValue) -> int:
    c = nth_arg("char->integer", args, 0)
    if not isinstance(c, Char):
        raise SanguiniusTypeError(f"char->integer: expected a character, got {c!r}")
    return c.code


def integer_to_char(args: LispValue) -> Char:
    n = fixnum_arg("integer->char", nth_arg("integer->char", args, 0))
    if not 0 <= n <= MAX_CODE_POINT or is_surrogate(n):
        raise SanguiniusValueError(f"integer->char: {n} is not a valid code point")
    return Char(n)


def number_to_string(args: LispValue) -> String:
    return String(fixnum_arg("number->string", nth_arg("number->string", args, 0)))


def string_to_number(args: LispValue) -> int:
    """Parse a decimal integer literal; anything else is an error, not #f."""
    s = nth_arg("string->number", args, 0)
    if not isinstance(s, str):
        raise SanguiniusTypeError(f"string->number: expected a string, got {s!r}")
    if not INTEGER_RE.fullmatch(s):
        raise SanguiniusValueError(f"string->number: {s!r} is not an integer literal")
    n = int(s)
    if not fits_fixnum(n):
        raise SanguiniusValueError(f"string->number: {s} is out of fixnum range")
    return n


def symbol_to_string(args: LispValue) -> String:
    s = nth_arg("symbol->string", args, 0)
    if not isinstance(s, Symbol):
        raise SanguiniusTypeError(f"symbol->string: expected a symbol, got {s!r}")
    return String(s.id)


def string_to_symbol(args: LispValue) -> Symbol:
    s = nth_arg("string->symbol", args, 0)
    if not isinstance(s, str):
        raise SanguiniusTypeError(f"string->symbol: expected a string, got {s!r}")
    return Symbol(str(s))


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: LispValue) -> int:
    """Sum of all arguments; (+) is 0."""
    result = 0
    cur = args
    while isinstance(cur, Pair):
        result += fixnum_arg("+", cur.first)
        cur = cur.rest
    if not fits_fixnum(result):
        raise SanguiniusValueError(f"+: fixnum overflow ({result})")
    return result


def num_eq(args: LispValue) -> Boolean:
    """#t if every argument is numerically equal to the first."""
    first = fixnum_arg("=", nth_arg("=", args, 0))
    result = TRUE
    cur = args.rest
    while isinstance(cur, Pair):
        if fixnum_arg("=", cur.first) != first:
            result = FALSE
        cur = cur.rest
    return result


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(args: LispValue) -> Pair:
    return Pair(nth_arg("cons", args, 0), nth_arg("cons", args, 1))


def car(args: LispValue) -> LispValue:
    return pair_car(nth_arg("car", args, 0))


def cdr(args: LispValue) -> LispValue:
    return pair_cdr(nth_arg("cdr", args, 0))


def list_(args: LispValue) -> LispValue:
    # The argument list is already a fresh proper list
    return args


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity, except fixnums and characters which are compared as immediates.

    Strings are String objects, so two literals or two conversion results are
    never eq? even when CPython would share the underlying str.
    """
    if is_fixnum(a) and is_fixnum(b):
        return a == b
    if isinstance(a, Char) and isinstance(b, Char):
        return a.code == b.code
    return a is b


def eq(args: LispValue) -> Boolean:
    return boolean(is_eq(nth_arg("eq?", args, 0), nth_arg("eq?", args, 1)))


PRIMITIVES: dict[str, Callable[[LispValue], LispValue]] = {
    "null?": is_null,
    "boolean?": is_boolean,
    "symbol?": is_symbol,
    "integer?": is_integer,
    "character?": is_character,
    "string?": is_string,
    "pair?": is_pair,
    "procedure?": is_procedure,
    "char->integer": char_to_integer,
    "integer->char": integer_to_char,
    "number->string": number_to_string,
    "string->number": string_to_number,
    "symbol->string": symbol_to_string,
    "string->symbol": string_to_symbol,
    "+": add,
    "=": num_eq,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_,
    "eq?": eq,
}


def register(env: Environment) -> None:
    """Define every primitive in `env`."""
    for name, fn in PRIMITIVES.items():
        env.define(Symbol(name), Primitive(name, fn))
