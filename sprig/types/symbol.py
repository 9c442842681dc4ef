from __future__ import annotations
import sys


class Symbol:
    """An interned name. Two symbols are equal when their names are."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
