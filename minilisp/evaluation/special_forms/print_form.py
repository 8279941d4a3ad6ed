from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.errors import MalformedSpecialForm
from minilisp.printer import format_value
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol
from minilisp.types.unit import Unit


def _print_operand(expr: SExpression, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> LispValue:
    # A bare symbol with no binding prints as its own text: (print Success)
    if isinstance(expr, Symbol) and not expr.is_bool_literal and not env.contains(expr):
        return expr.name
    return evaluate_fn(expr, env, runtime)


def print_form(
    tail: list[SExpression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(print a b ...) writes the space-separated display forms and a newline."""
    if not tail:
        raise MalformedSpecialForm("Missing values in print function")
    values = [_print_operand(e, env, runtime, evaluate_fn) for e in tail]
    print(" ".join(format_value(v) for v in values), file=runtime.stream)
    return Unit
