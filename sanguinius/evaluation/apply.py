"""Procedure application for Sanguinius.

Primitives are leaf calls into Python and return their value directly.
Compound procedures evaluate all but their last body form here and hand the
last one back to the evaluator loop as a TailCall, so a call in tail position
never deepens the Python stack.
"""

from sanguinius import LispValue, EvaluatorFn
from sanguinius.errors import SanguiniusApplicationError
from sanguinius.types.lambda_fn import Lambda
from sanguinius.types.nil import Nil
from sanguinius.types.primitive import Primitive
from sanguinius.types.tail_call import TailCall


def apply(procedure: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue | TailCall:
    """Apply `procedure` to an already evaluated argument list."""
    if isinstance(procedure, Primitive):
        return procedure(args)
    if isinstance(procedure, Lambda):
        new_env = procedure.extend_env(args)
        body = procedure.body
        while body.rest is not Nil:
            evaluate_fn(body.first, new_env)
            body = body.rest
        return TailCall(body.first, new_env)

    from sanguinius.printer import to_string
    raise SanguiniusApplicationError(f"invalid application: {to_string(procedure)} is not a procedure")
