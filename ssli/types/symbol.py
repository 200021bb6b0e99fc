"""Symbols: names that are not literals.

A Symbol is not a `str`, so a String value and a Symbol with the same text
are different values. Names are interned; symbols with equal names are equal
and hash alike regardless of identity.
"""

from __future__ import annotations

from sys import intern


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id: str = intern(name)

    @property
    def is_empty(self) -> bool:
        return not self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id is other.id

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
