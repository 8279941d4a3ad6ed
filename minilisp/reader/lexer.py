"""
  MiniLisp lexer

- Whitespace (newlines included) only separates tokens.
- '(' and ')' are always tokens of their own.
- Any other maximal run of characters is a single atom: a "number" when it
  reads as a decimal literal, a "symbol" otherwise.
- There are no comments and no string literals.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple

from minilisp.errors import LexError

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<atom>[^\s()]+)"
    r")",
)

# Decimal literals only: no inf/nan, no underscores, no hex
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class Token(NamedTuple):
    kind: str
    value: str


def is_number(text: str) -> bool:
    return NUMBER_RE.fullmatch(text) is not None


def _check_printable(text: str, offset: int) -> None:
    for i, ch in enumerate(text):
        if not ch.isprintable():
            raise LexError(f"Unexpected char at {offset + i}: {ch!r}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only trailing whitespace left
            break
        kind = m.lastgroup
        value = m.group(kind)
        if kind == "atom":
            _check_printable(value, m.start(kind))
            kind = "number" if is_number(value) else "symbol"
        pos = m.end()
        yield Token(kind, value)


def tokenize(source: str) -> list[Token]:
    """Eagerly tokenize `source`, so lex errors surface before any parsing."""
    tokens = list(lex(source))
    logger.debug("lexed %d token(s)", len(tokens))
    return tokens
