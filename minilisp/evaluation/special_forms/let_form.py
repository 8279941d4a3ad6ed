from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MalformedSpecialForm, TypeMismatch
from minilisp.evaluation.special_forms.names import check_binding_name
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment
from minilisp.types.unit import Unit


def let_form(
    tail: list[SExpression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Binds in the current frame; rebinding an existing name shadows it.
    """
    if len(tail) != 2:
        raise MalformedSpecialForm("Invalid variable definition! Must be (let name expr)")

    name, val_expr = tail
    check_binding_name(name, "let")
    value = evaluate_fn(val_expr, env, runtime)
    if value is Unit:
        raise TypeMismatch(f"Cannot assign Unit to variable {name}")
    env.define(name, value)
    return Unit
