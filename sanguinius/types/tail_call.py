from sanguinius import SExpression
from sanguinius.types.environment import Environment


class TailCall:
    """Tells the evaluator loop to continue with `expr` in `env` instead of returning."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
