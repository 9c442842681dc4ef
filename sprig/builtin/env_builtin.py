"""Built-in functions for the Sprig root environment.

This module defines arithmetic, comparison, list processing, text and output
builtins, plus `register`, which binds them all into an Environment.

Every builtin has the signature (ctx, args) with args already evaluated.
Truth values are the numbers 1 and 0.
"""
from __future__ import annotations

from typing import Callable

from sprig import LispValue
from sprig.errors import SprigArityError, SprigRuntimeError, SprigTypeError
from sprig.printer import to_display
from sprig.runtime_context import Context
from sprig.types.builtin import Builtin
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol
from sprig.types.value import is_callable, is_number, is_true, truth, type_name
from sprig.evaluation.apply import apply as apply_engine
from sprig.evaluation.evaluator import evaluate


# -------------------------------
# Argument checks
# -------------------------------
def expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise SprigArityError(
            f"argument count mismatch: {name} expects {count}, got {len(args)}"
        )


def expect_at_least(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise SprigArityError(
            f"argument count mismatch: {name} expects at least {count}, got {len(args)}"
        )


def expect_numbers(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not is_number(arg):
            raise SprigTypeError(f"type mismatch: {name} expects numbers, got {type_name(arg)}")


def expect_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise SprigTypeError(f"type mismatch: {name} expects a list, got {type_name(value)}")
    return value


def expect_integer(name: str, value: LispValue) -> int:
    if not is_number(value) or not isinstance(value, int):
        raise SprigTypeError(f"type mismatch: {name} expects an integer, got {type_name(value)}")
    return value


def expect_callable(name: str, value: LispValue) -> LispValue:
    if not is_callable(value):
        raise SprigTypeError(f"type mismatch: {name} expects a function, got {type_name(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(ctx: Context, args: list[LispValue]) -> LispValue:
    """Sum numbers, or concatenate lists or texts. All arguments must share a type."""
    if not args:
        return 0
    if all(is_number(a) for a in args):
        return sum(args)
    if all(isinstance(a, list) for a in args):
        result: list[LispValue] = []
        for a in args:
            result.extend(a)
        return result
    if all(isinstance(a, str) for a in args):
        return "".join(args)
    kinds = ", ".join(type_name(a) for a in args)
    raise SprigTypeError(f"type mismatch: + cannot combine {kinds}")


def sub(ctx: Context, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    expect_at_least("-", args, 1)
    expect_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(ctx: Context, args: list[LispValue]) -> LispValue:
    expect_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def truncating_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def div(ctx: Context, args: list[LispValue]) -> LispValue:
    """Divide left to right. Integers divide truncating toward zero."""
    expect_at_least("/", args, 2)
    expect_numbers("/", args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise SprigRuntimeError("division by zero")
        if isinstance(result, int) and isinstance(x, int):
            result = truncating_div(result, x)
        else:
            result = result / x
    return result


def mod(ctx: Context, args: list[LispValue]) -> LispValue:
    """(mod n d): remainder with the sign of n, consistent with /."""
    expect_arity("mod", args, 2)
    n = expect_integer("mod", args[0])
    d = expect_integer("mod", args[1])
    if d == 0:
        raise SprigRuntimeError("modulo by zero")
    return n - d * truncating_div(n, d)


# -------------------------------
# Comparison
# -------------------------------
def comparable(name: str, args: list[LispValue]) -> None:
    expect_at_least(name, args, 2)
    if all(is_number(a) for a in args) or all(isinstance(a, str) for a in args):
        return
    kinds = ", ".join(type_name(a) for a in args)
    raise SprigTypeError(f"type mismatch: {name} cannot compare {kinds}")


def chain(name: str, test: Callable[[LispValue, LispValue], bool]):
    """Build a chainable comparison: true if test holds for every adjacent pair."""
    def compare(ctx: Context, args: list[LispValue]) -> int:
        comparable(name, args)
        return truth(all(test(a, b) for a, b in zip(args, args[1:])))
    compare.__name__ = f"compare_{name}"
    return compare


lt = chain("<", lambda a, b: a < b)
lte = chain("<=", lambda a, b: a <= b)
gt = chain(">", lambda a, b: a > b)
gte = chain(">=", lambda a, b: a >= b)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality. Numbers compare by value; other mixed tags are unequal.

    Walks nested lists with an explicit stack, so nesting depth is unbounded.
    """
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if x is y:
            continue
        if is_number(x) and is_number(y):
            if x != y:
                return False
        elif isinstance(x, list) and isinstance(y, list):
            if len(x) != len(y):
                return False
            pending.extend(zip(x, y))
        elif isinstance(x, (str, Symbol)) and type(x) is type(y):
            if x != y:
                return False
        else:
            return False
    return True


def equals(ctx: Context, args: list[LispValue]) -> int:
    expect_at_least("=", args, 2)
    return truth(all(is_equal(a, b) for a, b in zip(args, args[1:])))


def logical_not(ctx: Context, args: list[LispValue]) -> int:
    expect_arity("not", args, 1)
    return truth(not is_true(args[0]))


# -------------------------------
# List operations
# -------------------------------
def list_builtin(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def length(ctx: Context, args: list[LispValue]) -> int:
    expect_arity("len", args, 1)
    xs = args[0]
    if not isinstance(xs, (list, str)):
        raise SprigTypeError(f"type mismatch: len expects a list or text, got {type_name(xs)}")
    return len(xs)


def first(ctx: Context, args: list[LispValue]) -> LispValue:
    expect_arity("first", args, 1)
    xs = expect_list("first", args[0])
    if not xs:
        raise SprigRuntimeError("first of an empty list")
    return xs[0]


def tail(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    expect_arity("tail", args, 1)
    xs = expect_list("tail", args[0])
    if not xs:
        raise SprigRuntimeError("tail of an empty list")
    return xs[1:]


def nth(ctx: Context, args: list[LispValue]) -> LispValue:
    """(nth list i) with a zero-based, non-negative index."""
    expect_arity("nth", args, 2)
    xs = expect_list("nth", args[0])
    i = expect_integer("nth", args[1])
    if not 0 <= i < len(xs):
        raise SprigRuntimeError(f"index {i} out of range for a list of length {len(xs)}")
    return xs[i]


def cons(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    expect_arity("cons", args, 2)
    head, xs = args
    return [head] + expect_list("cons", xs)


def reverse(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    expect_arity("reverse", args, 1)
    return list(reversed(expect_list("reverse", args[0])))


def range_builtin(ctx: Context, args: list[LispValue]) -> list[int]:
    """(range n) counts 0..n-1, (range a b) counts a..b-1."""
    if len(args) not in (1, 2):
        raise SprigArityError(f"argument count mismatch: range expects 1 or 2, got {len(args)}")
    bounds = [expect_integer("range", a) for a in args]
    return list(range(*bounds))


def filter_builtin(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    """(filter pred list) keeps the elements pred accepts, in their original order."""
    expect_arity("filter", args, 2)
    pred = expect_callable("filter", args[0])
    xs = expect_list("filter", args[1])
    return [x for x in xs if is_true(apply_engine(pred, [x], ctx, evaluate))]


def map_builtin(ctx: Context, args: list[LispValue]) -> list[LispValue]:
    expect_arity("map", args, 2)
    fn = expect_callable("map", args[0])
    xs = expect_list("map", args[1])
    return [apply_engine(fn, [x], ctx, evaluate) for x in xs]


# -------------------------------
# Text and output
# -------------------------------
def str_builtin(ctx: Context, args: list[LispValue]) -> str:
    return "".join(to_display(a) for a in args)


def print_builtin(ctx: Context, args: list[LispValue]) -> LispValue:
    """Write the argument to the output sink and return it unchanged."""
    expect_arity("print", args, 1)
    ctx.write(to_display(args[0]))
    return args[0]


BUILTINS: dict[str, Callable[[Context, list[LispValue]], LispValue]] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    'mod': mod,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    '=': equals,
    'not': logical_not,
    'list': list_builtin,
    'len': length,
    'first': first,
    'tail': tail,
    'nth': nth,
    'cons': cons,
    'reverse': reverse,
    'range': range_builtin,
    'filter': filter_builtin,
    'map': map_builtin,
    'str': str_builtin,
    'print': print_builtin,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
