"""Closure representation for MiniLisp functions."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


class Closure:
    """A named function with formal parameters, body, and defining env."""

    __slots__ = ("name", "formals", "body", "env")

    def __init__(
        self, name: Symbol, formals: list[Symbol], body: SExpression, env: Environment
    ):
        self.name: Symbol = name
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        return f"<func-object: {self.name}>"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn ")
            buffer.write(str(self.name))
            buffer.write(" (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write("))")
            return buffer.getvalue()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new frame for evaluating the body. The frame's parent is the
        defining environment, never the caller's.
        """
        if len(args) != len(self.formals):
            raise ArityMismatch(self.name, len(self.formals), len(args))
        return self.env.extend(self.formals, args)
