"""Core evaluator for the MiniLisp interpreter.

Dispatches on the shape of an expression: numbers evaluate to themselves,
symbols are looked up, and non-empty lists are either special forms, blocks
of statements, or function applications.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.errors import EmptyForm, RecursionDepthExceeded, TypeMismatch
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.printer import format_value
from minilisp.runtime_context import Runtime
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol, bool_literal
from minilisp.types.unit import Unit

logger = logging.getLogger(__name__)


def evaluate(
    expr: SExpression, env: Environment, runtime: Runtime | None = None
) -> LispValue:
    """
    Evaluate `expr` in `env`. Entry point for callers outside the evaluator;
    a Python RecursionError is reported as RecursionDepthExceeded.
    """
    if runtime is None:
        runtime = Runtime()
    try:
        return evaluate0(expr, env, runtime)
    except RecursionError as exc:
        runtime.reset()
        raise RecursionDepthExceeded("Expression nested too deeply to evaluate") from exc


def evaluate0(expr: SExpression, env: Environment, runtime: Runtime) -> LispValue:
    """Core evaluator: one recursive step, used by special forms and apply."""
    match expr:
        case []:
            raise EmptyForm("Cannot evaluate the empty form ()")

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, runtime, evaluate0)

        case [list(), *_]:
            # ((let x 1) (print x) ...) is a block of statements
            return evaluate_block(expr, env, runtime)

        case [head, *tail_args]:
            fn = evaluate0(head, env, runtime)
            if isinstance(fn, Closure):
                args = [evaluate_argument(arg, env, runtime) for arg in tail_args]
                return apply(fn, args, runtime, evaluate0)
            # (x) reads the value of x
            if not tail_args:
                return fn
            raise TypeMismatch(f"Cannot apply non-function {format_value(fn)}")

        case Symbol():
            return resolve_symbol(expr, env)

    # --- Numbers return as-is ---
    return expr


def resolve_symbol(symbol: Symbol, env: Environment) -> LispValue:
    """True and False are literal keywords; every other symbol is looked up."""
    if symbol.is_bool_literal:
        return bool_literal(symbol)
    return env.lookup(symbol)


def evaluate_argument(expr: SExpression, env: Environment, runtime: Runtime) -> LispValue:
    value = evaluate0(expr, env, runtime)
    if value is Unit:
        raise TypeMismatch("Cannot pass Unit as an argument to a function")
    return value


def evaluate_block(
    forms: list[SExpression], env: Environment, runtime: Runtime
) -> LispValue:
    """Evaluate each form in order in `env`; the block's value is the last one."""
    result: LispValue = Unit
    for form in forms:
        result = evaluate0(form, env, runtime)
    return result
