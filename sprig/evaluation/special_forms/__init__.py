"""Registry of special forms for the Sprig evaluator.

The set of special forms is fixed: SpecialForm enumerates them and
SPECIAL_FORMS maps each form's Symbol to its handler. The evaluator consults
the table once per application, before evaluating the head.

Every handler has the signature (args, env, ctx, evaluate_fn) and receives its
arguments unevaluated.
"""

from enum import Enum

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.do_form import do_form
from sprig.evaluation.special_forms.scope_form import scope_form
from sprig.evaluation.special_forms.define_form import define_form, defun_form
from sprig.evaluation.special_forms.set_form import set_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.quote_form import quote_form
from sprig.evaluation.special_forms.loop_forms import for_form, while_form


class SpecialForm(Enum):
    IF = "if"
    DO = "do"
    SCOPE = "scope"
    DEFUN = "defun"
    DEFINE = "define"
    SET = "set"
    LAMBDA = "lambda"
    QUOTE = "quote"
    FOR = "for"
    WHILE = "while"


HANDLERS = {
    SpecialForm.IF: if_form,
    SpecialForm.DO: do_form,
    SpecialForm.SCOPE: scope_form,
    SpecialForm.DEFUN: defun_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.SET: set_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.FOR: for_form,
    SpecialForm.WHILE: while_form,
}

SPECIAL_FORMS = {Symbol(form.value): HANDLERS[form] for form in SpecialForm}
