"""Function application for MiniLisp.

A call binds the already-evaluated arguments in a fresh frame whose parent is
the closure's defining environment, evaluates the body there, and drops the
frame when the body returns.
"""

from __future__ import annotations

import logging

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import TypeMismatch
from minilisp.runtime_context import Runtime
from minilisp.types.closure import Closure

logger = logging.getLogger(__name__)


def apply(
    fn: Closure,
    args: list[LispValue],
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to evaluated arguments.

    Raises ArityMismatch when the argument count differs from the parameter
    count, and RecursionDepthExceeded past the runtime's call depth limit.
    """
    if not isinstance(fn, Closure):
        raise TypeMismatch(f"Cannot apply non-function {fn!r}")

    new_env = fn.extend_env(args)
    runtime.enter_call(fn.name)
    try:
        logger.debug("call %s depth=%d args=%r", fn.name, runtime.depth, args)
        return evaluate_fn(fn.body, new_env, runtime)
    finally:
        runtime.exit_call()
