from sanguinius import SExpression, LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.types.environment import Environment
from sanguinius.types.pair import list_length
from sanguinius.types.symbol import Symbol, OK


def set_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(set! name expr): overwrite the nearest existing binding of name."""
    if list_length(tail) != 2:
        raise SanguiniusSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SanguiniusSyntaxError(f"set!: invalid variable name {name!r}")
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return OK
