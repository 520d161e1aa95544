"""Runtime environment for Sanguinius.

An Environment is one frame of bindings from Symbols to evaluated values plus
an `outer` link to the enclosing frame. Chains of frames give lexical scope:
procedures capture the frame they were created in and extend it on each call.

`EMPTY` is the boundary of every chain. It holds no bindings and is never
extended by user code directly; the global environment is its only child.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sanguinius import LispValue
from sanguinius.errors import (
    SanguiniusArityError,
    SanguiniusEvalError,
    SanguiniusSyntaxError,
    SanguiniusUnboundSymbol,
)
from sanguinius.types.nil import Nil
from sanguinius.types.pair import Pair
from sanguinius.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises SanguiniusSyntaxError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SanguiniusSyntaxError(f"Cannot define {name!r}: not a symbol")
        if self is EMPTY:
            raise SanguiniusEvalError(f"Cannot define {name} in the empty environment")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward through the chain.

        Raises SanguiniusUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise SanguiniusUnboundSymbol(f"unbound variable '{name}'")
        return env.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding for `name`.

        Never creates a binding. Raises SanguiniusUnboundSymbol if the symbol
        is not bound anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise SanguiniusUnboundSymbol(f"unbound variable '{name}'")
        env.vars[name] = value

    @classmethod
    def extend(cls, params: LispValue, args: LispValue, outer: Environment) -> Environment:
        """Return a child frame of `outer` binding each parameter to its argument.

        `params` must be a proper list of Symbols and `args` a proper list of
        the same length.
        """
        env = cls(outer)
        cur_params, cur_args = params, args
        while isinstance(cur_params, Pair):
            param = cur_params.first
            if not isinstance(param, Symbol):
                raise SanguiniusSyntaxError(f"invalid parameter {param!r}")
            if not isinstance(cur_args, Pair):
                raise SanguiniusArityError(
                    f"too few arguments: expected {_count(params)}, got {_count(args)}"
                )
            env.vars[param] = cur_args.first
            cur_params, cur_args = cur_params.rest, cur_args.rest
        if cur_params is not Nil:
            raise SanguiniusSyntaxError(f"invalid parameter list, improper tail {cur_params!r}")
        if cur_args is not Nil:
            raise SanguiniusArityError(
                f"too many arguments: expected {_count(params)}, got {_count(args)}"
            )
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment {len(self.vars)} bindings, depth {depth}>"


def _count(values: LispValue) -> int:
    n = 0
    while isinstance(values, Pair):
        n += 1
        values = values.rest
    return n


EMPTY = Environment()
