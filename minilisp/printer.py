"""Display forms of runtime values, as written by `print`."""

from __future__ import annotations

import math

from minilisp import LispValue
from minilisp.types.unit import UnitType


def format_number(n: float) -> str:
    """Integral floats print without a fraction: 3.0 -> "3", 2.5 -> "2.5"."""
    if math.isfinite(n) and n.is_integer():
        return str(int(n))
    return repr(n)


def format_value(x: LispValue) -> str:
    """Convert a value to its printable string form (closures -> <func-object: name>)."""
    if isinstance(x, bool):
        return "True" if x else "False"
    if isinstance(x, float):
        return format_number(x)
    if isinstance(x, UnitType):
        return "()"
    return str(x)
