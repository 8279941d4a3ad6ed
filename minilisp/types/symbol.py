from __future__ import annotations
import sys


class Symbol:
    """An atom that is not a number: a variable, function or special form name.

    Names are interned, so equal symbols share one string and compare fast.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    @property
    def is_bool_literal(self) -> bool:
        """True for the keywords True and False, which are never looked up."""
        return self.name in _BOOL_LITERALS

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


_BOOL_LITERALS = {"True": True, "False": False}


def bool_literal(symbol: Symbol) -> bool:
    """Value of a True/False keyword; KeyError for any other symbol."""
    return _BOOL_LITERALS[symbol.name]
