"""Helpers shared by the evaluator and builtins for classifying values."""

from __future__ import annotations

from sprig import LispValue
from sprig.types.symbol import Symbol
from sprig.types.closure import Closure
from sprig.types.builtin import Builtin


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but never a Sprig number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_callable(value: LispValue) -> bool:
    return isinstance(value, (Closure, Builtin))


def is_true(value: LispValue) -> bool:
    """Zero, the empty list and empty text are false; everything else is true."""
    if is_number(value):
        return value != 0
    if isinstance(value, (list, str)):
        return len(value) > 0
    return True


def truth(flag: bool) -> int:
    return 1 if flag else 0


def type_name(value: LispValue) -> str:
    match value:
        case int() | float():
            return "number"
        case str():
            return "text"
        case Symbol():
            return "symbol"
        case list():
            return "list"
        case Closure():
            return "closure"
        case Builtin():
            return "builtin"
    return type(value).__name__
