"""Runtime environment for MiniLisp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Every function call gets a fresh frame
whose `outer` is the frame the function was defined in, so free variables
resolve lexically.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from minilisp import LispValue
from minilisp.errors import MalformedSpecialForm, UnboundSymbol
from minilisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any previous binding.

        Raises MalformedSpecialForm if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalformedSpecialForm(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def contains(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(name)
        return env.vars[name]

    def extend(self, names: Iterable[Symbol], values: Iterable[LispValue]) -> Environment:
        """Return a child frame of this environment holding the given bindings."""
        frame = Environment(outer=self)
        for name, value in zip(names, values):
            frame.define(name, value)
        return frame

    def depth(self) -> int:
        """Number of frames in the chain, this one included."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
