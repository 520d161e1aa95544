"""Compound procedure representation for Sanguinius."""

from __future__ import annotations

from sanguinius import SExpression, LispValue
from sanguinius.types.environment import Environment


class Lambda:
    """A procedure created by `lambda`: formal parameters, body and closure env.

    `env` is the environment the lambda was evaluated in, shared by reference,
    never the environment of a later call.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params = params
        # A non-empty proper list of body forms
        self.body = body
        self.env = env

    def extend_env(self, args: LispValue) -> Environment:
        """Bind argument values to the formal parameters in a child of the closure env."""
        return Environment.extend(self.params, args, self.env)

    def __repr__(self) -> str:
        from sanguinius.printer import to_string
        return f"<Lambda {to_string(self.params)}>"
