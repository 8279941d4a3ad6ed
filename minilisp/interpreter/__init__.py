from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from minilisp import LispValue
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import read
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment
from minilisp.types.unit import Unit

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating MiniLisp code.
    Maintains one global Environment across calls, so later code sees the
    let/fn bindings of earlier code.
    """

    def __init__(self, out: TextIO | None = None, max_depth: int | None = None):
        self.runtime: Runtime = Runtime(out=out, max_depth=max_depth)
        self.env: Environment = Environment()

    def reset(self) -> None:
        """Drop every global binding."""
        self.env = Environment()
        self.runtime.reset()

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`, returning the last value.

        The whole text is parsed before anything runs, so a parse error
        evaluates nothing. The first evaluation error aborts the remaining forms.
        """
        forms = read(code)
        result: LispValue = Unit
        for expr in forms:
            logger.debug("eval %r", expr)
            result = evaluate(expr, self.env, self.runtime)
        return result

    def run_file(self, path: str | Path) -> LispValue:
        """Batch mode: evaluate a source file in a fresh global environment."""
        code = Path(path).read_text(encoding="utf-8")
        self.reset()
        logger.info("running %s", path)
        return self.eval(code)
