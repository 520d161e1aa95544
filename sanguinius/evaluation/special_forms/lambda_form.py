from sanguinius import SExpression, LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.types.environment import Environment
from sanguinius.types.lambda_fn import Lambda
from sanguinius.types.nil import Nil
from sanguinius.types.pair import Pair, list_length
from sanguinius.types.symbol import Symbol


def lambda_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda params body...) closes over the environment it is evaluated in.
    # A body of several forms is evaluated in sequence on each call.
    length = list_length(tail)
    if length is None or length < 2:
        raise SanguiniusSyntaxError("lambda requires a parameter list and a body")

    params = tail.first
    check_params(params)
    return Lambda(params, tail.rest, env)


def check_params(params: SExpression) -> None:
    cur = params
    while isinstance(cur, Pair):
        if not isinstance(cur.first, Symbol):
            raise SanguiniusSyntaxError(f"invalid parameter {cur.first!r}")
        cur = cur.rest
    if cur is not Nil:
        raise SanguiniusSyntaxError("variadic parameter lists are not supported")
