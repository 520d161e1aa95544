"""The closed set of runtime value variants and the environment model."""

from sanguinius.types.boolean import Boolean, TRUE, FALSE, boolean
from sanguinius.types.char import Char
from sanguinius.types.environment import Environment, EMPTY
from sanguinius.types.fixnum import FIXNUM_MAX, FIXNUM_MIN, is_fixnum
from sanguinius.types.lambda_fn import Lambda
from sanguinius.types.nil import Nil, NilType
from sanguinius.types.pair import Pair, cons, car, cdr, make_list, iter_list, list_length
from sanguinius.types.primitive import Primitive
from sanguinius.types.string import String
from sanguinius.types.symbol import Symbol, symbol_table

__all__ = [
    "Boolean", "TRUE", "FALSE", "boolean",
    "Char",
    "Environment", "EMPTY",
    "FIXNUM_MAX", "FIXNUM_MIN", "is_fixnum",
    "Lambda",
    "Nil", "NilType",
    "Pair", "cons", "car", "cdr", "make_list", "iter_list", "list_length",
    "Primitive",
    "String",
    "Symbol", "symbol_table",
    "is_procedure",
]


def is_procedure(value: object) -> bool:
    return isinstance(value, (Primitive, Lambda))
