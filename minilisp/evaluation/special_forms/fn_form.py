from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MalformedSpecialForm
from minilisp.evaluation.special_forms.names import check_binding_name
from minilisp.runtime_context import Runtime
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.unit import Unit


def fn_form(
    tail: list[SExpression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn name (params...) body)
    The closure captures `env`, so the body resolves free variables where the
    function was defined. Binding the name in that same frame allows recursion.
    """
    if len(tail) != 3:
        raise MalformedSpecialForm(
            "Invalid function definition! Must be (fn name (args) body)"
        )

    name, params, body = tail
    check_binding_name(name, "fn")
    if not isinstance(params, list):
        raise MalformedSpecialForm(f"fn {name}: parameters must be a list of symbols")

    formals = [check_binding_name(p, f"fn {name}") for p in params]
    if len(set(formals)) != len(formals):
        raise MalformedSpecialForm(f"fn {name}: duplicate parameter name")

    env.define(name, Closure(name, formals, body, env))
    return Unit
