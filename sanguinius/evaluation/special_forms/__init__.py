"""Registry of special forms for the Sanguinius evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, keyed by interned symbol, before treating
a pair as a procedure application.

Every handler has the signature ``handler(tail, env, evaluate_fn)`` where
`tail` is the list of operands following the keyword. A handler returns
either the form's value or a TailCall naming the expression that produces it.
"""

from sanguinius.types.symbol import QUOTE, SET, DEFINE, IF, LAMBDA
from sanguinius.evaluation.special_forms.quote_form import quote_form
from sanguinius.evaluation.special_forms.set_form import set_form
from sanguinius.evaluation.special_forms.define_form import define_form
from sanguinius.evaluation.special_forms.if_form import if_form
from sanguinius.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    SET: set_form,
    DEFINE: define_form,
    IF: if_form,
    LAMBDA: lambda_form,
}
