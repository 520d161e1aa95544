from sanguinius import SExpression, LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.types.environment import Environment
from sanguinius.types.pair import Pair, list_length
from sanguinius.types.symbol import Symbol, LAMBDA, OK


def define_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name expr)
    (define (name . params) body...)  ; same as (define name (lambda params body...))

    Always binds in the innermost frame of `env`.
    """
    length = list_length(tail)
    if length is None or length < 2:
        raise SanguiniusSyntaxError("define requires a name and a value")

    target = tail.first
    if isinstance(target, Symbol):
        if length != 2:
            raise SanguiniusSyntaxError("define requires exactly 2 arguments: (define var value)")
        name, val_expr = target, tail.rest.first
    elif isinstance(target, Pair) and isinstance(target.first, Symbol):
        name = target.first
        val_expr = Pair(LAMBDA, Pair(target.rest, tail.rest))
    else:
        raise SanguiniusSyntaxError(f"define: invalid definition name {target!r}")

    env.define(name, evaluate_fn(val_expr, env))
    return OK

