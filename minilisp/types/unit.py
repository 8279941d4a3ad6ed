from __future__ import annotations


class UnitType:
    """Result of forms evaluated only for their effect (let, fn, print)."""

    def __repr__(self): return "Unit"
    def __str__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()
