"""Arithmetic special forms: (+ ...), (- ...), (* ...), (/ ...).

All operands are evaluated left to right and must be numbers. The first value
is the starting accumulator and each later value is folded into it, so
(- 10 1 2) is 7 and (/ 8 2 2) is 2. A single operand is returned unchanged.
"""

from __future__ import annotations

import operator
from typing import Callable

from minilisp import SExpression, EvaluatorFn
from minilisp.errors import DivisionByZero, MalformedSpecialForm, TypeMismatch
from minilisp.printer import format_value
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment


def _eval_numbers(
    op: str, tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn
) -> list[float]:
    if not tail:
        raise MalformedSpecialForm(f"{op} must be performed on at least one number")
    values = []
    for expr in tail:
        val = evaluate_fn(expr, env, runtime)
        if not isinstance(val, float):
            raise TypeMismatch(f"{op} must be performed on numbers, got {format_value(val)}")
        values.append(val)
    return values


def _fold(op: str, fn: Callable[[float, float], float]):
    def form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> float:
        values = _eval_numbers(op, tail, env, runtime, evaluate_fn)
        result = values[0]
        for x in values[1:]:
            result = fn(result, x)
        return result

    return form


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero(f"Division by zero: {format_value(a)} / {format_value(b)}")
    return a / b


add_form = _fold("+", operator.add)
sub_form = _fold("-", operator.sub)
mul_form = _fold("*", operator.mul)
div_form = _fold("/", _divide)
