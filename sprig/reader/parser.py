"""
  Sprig Reader, Lexer and Parser

- Streaming, lazy lexing; one TokenStream per input so the reader is re-entrant
- Emits Python primitives instead of Cons cells:

    - lists -> Python list (code and data share the representation)
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sprig import SExpression
from sprig.errors import SprigSyntaxError, SprigIncompleteInput
from sprig.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote sugar
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote mark that is never closed
    r"|(?P<atom>[^\s()'\";]+)"  # numbers and symbols
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only trailing whitespace is left
            break
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "open_string":
            raise SprigIncompleteInput("unterminated string literal")
        yield kind, m.group(kind)


def parse_atom(token: str) -> SExpression:
    if INT_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


def decode_string(token: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), token[1:-1])


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise SprigIncompleteInput("unexpected end of input")

        if tok_type == "atom":
            return parse_atom(tok_val)

        if tok_type == "string":
            return decode_string(tok_val)

        # 'x reads as (quote x) before anything is evaluated
        if tok_type == "quote":
            if self.at_end():
                raise SprigIncompleteInput("expected an expression after '")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SprigIncompleteInput("unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SprigSyntaxError("unmatched ')'")

        raise SprigSyntaxError(f"unknown token: {tok_type} {tok_val}")

    def next_form(self) -> SExpression:
        try:
            return self.parse_expr()
        except RecursionError:
            raise SprigSyntaxError("input nested too deeply") from None

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.next_form()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Read exactly one form from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.next_form()
    if not stream.at_end():
        raise SprigSyntaxError("unexpected input after the first expression")
    return expr
