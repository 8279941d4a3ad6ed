from minilisp import SExpression, EvaluatorFn
from minilisp.errors import MalformedSpecialForm, TypeMismatch
from minilisp.printer import format_value
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment


def _eval_bool(expr: SExpression, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn, op: str) -> bool:
    val = evaluate_fn(expr, env, runtime)
    if not isinstance(val, bool):
        raise TypeMismatch(f"{op} expects boolean operands, got {format_value(val)}")
    return val


def and_form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns False at
    the first False without evaluating the rest, else True.
    """
    if not tail:
        raise MalformedSpecialForm("and requires at least one operand")
    for expr in tail:
        if not _eval_bool(expr, env, runtime, evaluate_fn, "and"):
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns True at
    the first True without evaluating the rest, else False.
    """
    if not tail:
        raise MalformedSpecialForm("or requires at least one operand")
    for expr in tail:
        if _eval_bool(expr, env, runtime, evaluate_fn, "or"):
            return True
    return False


def not_form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> bool:
    if len(tail) != 1:
        raise MalformedSpecialForm("Negation must be performed on exactly one operand")
    return not _eval_bool(tail[0], env, runtime, evaluate_fn, "not")
