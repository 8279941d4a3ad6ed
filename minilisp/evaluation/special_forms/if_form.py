from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MalformedSpecialForm, TypeMismatch
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment
from minilisp.types.unit import Unit


def is_truthy(value: LispValue) -> bool:
    """False is the only false value; Unit cannot be tested."""
    if value is Unit:
        raise TypeMismatch("If statement predicate cannot return Unit")
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise MalformedSpecialForm(
            "Invalid if statement! Must be (if predicate then else)"
        )

    predicate, then, otherwise = tail
    # Only the taken branch is evaluated
    if is_truthy(evaluate_fn(predicate, env, runtime)):
        return evaluate_fn(then, env, runtime)
    return evaluate_fn(otherwise, env, runtime)
