from sanguinius import SExpression, LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusSyntaxError
from sanguinius.types.boolean import TRUE, FALSE
from sanguinius.types.environment import Environment
from sanguinius.types.pair import list_length
from sanguinius.types.tail_call import TailCall


def if_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(if test consequent [alternative])

    Only the TRUE singleton selects the consequent. The chosen branch is in
    tail position, so it is handed back to the evaluator loop.
    """
    length = list_length(tail)
    if length not in (2, 3):
        raise SanguiniusSyntaxError("if requires a test, a consequent and an optional alternative")

    test = evaluate_fn(tail.first, env)
    branches = tail.rest
    if test is TRUE:
        return TailCall(branches.first, env)
    if length == 3:
        return TailCall(branches.rest.first, env)
    return FALSE
