"""Core evaluator and trampoline for the Sanguinius interpreter.

`evaluate` is a loop over (expr, env). Special forms and compound procedure
calls may answer with a TailCall instead of a value; the loop then rebinds
expr and env and goes round again. Tail calls therefore run in constant
Python stack depth. Only non-tail subexpressions (operands, the test of an
`if`, non-final body forms) recurse.
"""

from __future__ import annotations

from sanguinius import SExpression, LispValue
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.evaluation.apply import apply
from sanguinius.evaluation.special_forms import SPECIAL_FORMS
from sanguinius.types.boolean import Boolean
from sanguinius.types.char import Char
from sanguinius.types.environment import Environment
from sanguinius.types.nil import Nil
from sanguinius.types.pair import Pair, make_list
from sanguinius.types.symbol import Symbol
from sanguinius.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`."""
    while True:
        match expr:
            case Boolean() | int() | Char() | str():
                return expr
            case Symbol():
                return env.lookup(expr)
            case Pair(first=Symbol() as keyword) if keyword in SPECIAL_FORMS:
                result = SPECIAL_FORMS[keyword](expr.rest, env, evaluate)
            case Pair():
                procedure = evaluate(expr.first, env)
                args = evaluate_operands(expr.rest, env)
                result = apply(procedure, args, evaluate)
            case _:
                raise SanguiniusSyntaxError(f"cannot eval unknown expression type {expr!r}")

        if not isinstance(result, TailCall):
            return result
        expr, env = result.expr, result.env


def evaluate_operands(operands: SExpression, env: Environment) -> LispValue:
    """Evaluate operands left to right into a fresh argument list."""
    values = []
    cur = operands
    while isinstance(cur, Pair):
        values.append(evaluate(cur.first, env))
        cur = cur.rest
    if cur is not Nil:
        raise SanguiniusSyntaxError("improper operand list in application")
    return make_list(values)
