# Core type aliases for MiniLisp's data model.
# Plain Python types represent both code (forms) and runtime values:
#   numbers -> float, symbols -> Symbol, lists -> list, booleans -> bool,
#   printed atoms -> str, functions -> Closure, statements -> Unit.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
