from __future__ import annotations

import sys
from typing import Optional, TextIO

from minilisp.config import get_max_depth
from minilisp.errors import RecursionDepthExceeded


class Runtime:
    """Per-interpreter evaluation state: the print sink and the call depth.

    Nothing here is process-global; each Interpreter owns one Runtime.
    """

    __slots__ = ("out", "max_depth", "depth")

    def __init__(self, out: Optional[TextIO] = None, max_depth: Optional[int] = None):
        self.out: Optional[TextIO] = out
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.depth: int = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees writes to the current stdout
        return self.out if self.out is not None else sys.stdout

    def enter_call(self, name) -> None:
        if self.depth >= self.max_depth:
            raise RecursionDepthExceeded(
                f"Maximum call depth {self.max_depth} exceeded in {name}"
            )
        self.depth += 1

    def exit_call(self) -> None:
        self.depth -= 1

    def reset(self) -> None:
        self.depth = 0
