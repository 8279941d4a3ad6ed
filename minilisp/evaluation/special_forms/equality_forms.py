from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.errors import MalformedSpecialForm
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for values of the same kind; other kinds never match."""
    if a is b:
        return True
    # bool is an int subclass; True must not equal 1.0
    if type(a) is not type(b):
        return False
    return a == b


def _operands(op: str, tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn):
    if len(tail) != 2:
        raise MalformedSpecialForm(f"{op} compares exactly two operands")
    return evaluate_fn(tail[0], env, runtime), evaluate_fn(tail[1], env, runtime)


def equals_form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> bool:
    """(= a b) -> True if a and b are the same kind and equal."""
    return is_equal(*_operands("=", tail, env, runtime, evaluate_fn))


def not_equals_form(tail: list[SExpression], env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> bool:
    """(!= a b) -> logical negation of (= a b)."""
    return not is_equal(*_operands("!=", tail, env, runtime, evaluate_fn))
