from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError
from sprig.runtime_context import Context
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.evaluation.special_forms.lambda_form import parse_params


def define_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost frame only, shadowing any outer binding. Returns the value.
    """
    if len(tail) != 2:
        raise SprigArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env, ctx)
    env.define(name, value)
    return value


def defun_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params) body)
    The closure captures the frame it is defined in, so it can call itself by name.
    """
    if len(tail) != 3:
        raise SprigArityError("defun requires a name, a parameter list and exactly one body form")

    name, params, body = tail
    fn = Closure(parse_params(params), body, env, name)
    env.define(name, fn)
    return fn
