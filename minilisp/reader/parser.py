"""
  MiniLisp parser

Recursive descent over a token stream. Emits Python primitives:

    - numbers -> float
    - symbols -> Symbol
    - lists   -> Python list

Parsing is all-or-nothing: `parse` either returns every top-level form or
raises, it never hands back a partial tree.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from minilisp import SExpression
from minilisp.errors import ParseError, UnbalancedParens, UnexpectedEof
from minilisp.reader.lexer import Token, tokenize
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self.open_lists = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise UnexpectedEof("Unexpected end of input, expected an expression")

        if tok_type == "rparen":
            raise UnbalancedParens("Unexpected ')' encountered")

        if tok_type == "number":
            self.advance()
            return float(tok_val)

        if tok_type == "symbol":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "lparen":
            self.advance()
            return self._parse_list()

        raise ParseError(f"Unknown token: {tok_type} {tok_val}")

    def _parse_list(self) -> list[SExpression]:
        items: list[SExpression] = []
        self.open_lists += 1
        while True:
            tok_type, _ = self.peek()
            if tok_type == "rparen":
                self.advance()
                self.open_lists -= 1
                return items
            if tok_type is None:
                raise UnbalancedParens(
                    f"Unclosed delimiter: {self.open_lists} '(' still open at end of input"
                )
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse every top-level form in `tokens`.

    Nesting deep enough to exhaust the Python stack is reported as a ParseError.
    """
    try:
        forms = list(TokenStream(tokens).parse_all())
    except RecursionError as exc:
        raise ParseError("Expression nested too deeply to parse") from exc
    logger.debug("parsed %d top-level form(s)", len(forms))
    return forms


def parse_one(tokens: Iterable[Token]) -> SExpression:
    """Parse exactly one expression from `tokens`."""
    stream = TokenStream(tokens)
    try:
        expr = stream.parse_expr()
    except RecursionError as exc:
        raise ParseError("Expression nested too deeply to parse") from exc
    if not stream.at_end():
        raise ParseError("Expected a single expression but found trailing input")
    return expr


def read(source: str) -> list[SExpression]:
    """Tokenize and parse `source` into its top-level forms."""
    return parse(tokenize(source))
