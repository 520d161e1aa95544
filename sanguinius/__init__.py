# Core type aliases for the Sanguinius data model.
# Fixnums are plain Python ints and strings plain Python strs; every other
# runtime datum (Nil, booleans, characters, pairs, symbols, procedures) has its
# own class under sanguinius.types.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the closed set of variants lives in
# sanguinius.types.

from typing import Any, Callable

__version__ = "0.13"

# Runtime value alias
LispValue = Any
# Forms are values too
SExpression = LispValue

# Evaluator function type: passed into special forms and apply
EvaluatorFn = Callable[..., LispValue]
