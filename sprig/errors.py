"""Error hierarchy for Sprig.

Every failure is a SprigError. Besides its message, an error records the
expression that failed and a snapshot of the bindings visible in the innermost
frame at that moment. Builtins and special forms raise without location; the
evaluator fills it in on the way out (see SprigError.locate).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprig.types.environment import Environment


class SprigError(Exception):
    """ Base class for all Sprig errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.expr = None
        self.scope: dict = {}
        self.located = False

    def locate(self, expr, env: Environment) -> None:
        """Record the failing expression and scope once, at the innermost frame."""
        if self.located:
            return
        self.expr = expr
        self.scope = env.snapshot()
        self.located = True

    def __str__(self) -> str:
        return self.message


class SprigSyntaxError(SprigError):
    """ Raised when the reader meets malformed input"""


class SprigIncompleteInput(SprigSyntaxError):
    """ Raised when input ends inside a list, a string or after a quote"""


class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is used before it is bound"""


class SprigNotApplicable(SprigError):
    """ Raised when the head of an application is not callable"""


class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""


class SprigTypeError(SprigError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class SprigInvalidSymbol(SprigTypeError):
    """ Raised when a name or parameter position holds something other than a symbol"""


class SprigRuntimeError(SprigError):
    """ Raised by builtins for operation-specific failures (empty list, division by zero, depth)"""
