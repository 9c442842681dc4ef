"""Textual rendering of Sprig values, scopes and errors.

Two forms are produced for every value:
- to_repr: readable back by the reader where possible (text is quoted and
  escaped); used for the `=>` echo and inside lists and scopes.
- to_display: like to_repr, except that top-level text is written raw; used
  by `print` and `str`.
"""

from __future__ import annotations

from sprig import LispValue
from sprig.errors import SprigError
from sprig.types.builtin import Builtin
from sprig.types.closure import Closure
from sprig.types.symbol import Symbol

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def quote_text(text: str) -> str:
    return '"' + "".join(ESCAPES.get(c, c) for c in text) + '"'


def atom_repr(value: LispValue) -> str:
    match value:
        case int() | float():
            return repr(value)
        case str():
            return quote_text(value)
        case Symbol():
            return value.name
        case Closure() | Builtin():
            return repr(value)
    return str(value)


# markers pushed between list items on the to_repr work stack
CLOSE = object()
SPACE = object()


def to_repr(value: LispValue) -> str:
    """Render a value; nested lists are walked with an explicit stack, so depth is unbounded."""
    parts: list[str] = []
    stack: list[LispValue] = [value]
    while stack:
        item = stack.pop()
        if item is CLOSE:
            parts.append(")")
        elif item is SPACE:
            parts.append(" ")
        elif isinstance(item, list):
            parts.append("(")
            stack.append(CLOSE)
            for i in range(len(item) - 1, -1, -1):
                stack.append(item[i])
                if i:
                    stack.append(SPACE)
        else:
            parts.append(atom_repr(item))
    return "".join(parts)


def to_display(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    return to_repr(value)


def format_scope(scope: dict[Symbol, LispValue]) -> str:
    """Render bindings as { name: value, ... }; builtins are left out."""
    items = [
        f"{name}: {to_repr(value)}"
        for name, value in scope.items()
        if not isinstance(value, Builtin)
    ]
    if not items:
        return "{}"
    return "{ " + ", ".join(items) + " }"


def format_error(err: SprigError) -> str:
    return (
        f"error: the expression {to_repr(err.expr)} failed in scope "
        f"{format_scope(err.scope)} with message \"{err.message}\""
    )


def format_read_error(err: SprigError) -> str:
    return f"error: could not read input: \"{err.message}\""
