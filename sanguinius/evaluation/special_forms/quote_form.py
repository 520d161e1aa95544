from sanguinius import SExpression, LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.types.environment import Environment
from sanguinius.types.pair import list_length


def quote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote datum) => datum, unevaluated."""
    if list_length(tail) != 1:
        raise SanguiniusSyntaxError("quote expects exactly 1 argument")
    return tail.first
