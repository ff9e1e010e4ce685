"""
Tokenizer for the Formulon expression language.

Converts an expression string into a sequence of typed tokens.

Whitespace is removed before scanning, so "1 2" is the single number 12 and
"si n(x)" is a call to sin. Token positions still refer to the original
string.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum, auto

from formulon.core.environment import get_settings
from formulon.core.errors import LexError, LexErrorKind
from formulon.core.expression_lang.functions import is_function

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()
    VARIABLE = auto()
    OPERATOR = auto()
    PAREN = auto()
    FUNCTION = auto()


class Token:
    """A single token from the expression tokenizer.

    ``value`` is a float for NUMBER tokens and a string for every other kind:
    the identifier for VARIABLE/FUNCTION, the symbol for OPERATOR, and "(" or
    ")" for PAREN.
    """

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: float | str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    @property
    def is_open_paren(self) -> bool:
        return self.kind == TokenKind.PAREN and self.value == "("

    @property
    def is_close_paren(self) -> bool:
        return self.kind == TokenKind.PAREN and self.value == ")"

    def is_operator(self, *symbols: str) -> bool:
        return self.kind == TokenKind.OPERATOR and self.value in symbols


OPERATORS = "+-*/^"

# Maximal run of digits and dots; "1.2.3" is one (malformed) numeral
_NUMBER_RE = re.compile(r"[0-9.]+")
# Identifier: ASCII letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _parse_number(text: str) -> float:
    """Convert a digit/dot run to a float; malformed numerals become NaN."""
    try:
        return float(text)
    except ValueError:
        return float("nan")


def tokenize(source: str, *, max_length: int | None = None) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Args:
        source: Expression text, e.g. "sqrt(x) * 2"
        max_length: Longest accepted input; 0 disables the check. Defaults
            to the configured max_expression_length.

    Returns:
        Tokens in source order. No end-of-input token is appended.

    Raises:
        LexError: On a character outside every token class, or when the
            input is longer than max_length.
    """
    limit = get_settings().max_expression_length if max_length is None else max_length
    if limit and len(source) > limit:
        raise LexError(
            LexErrorKind.EXPRESSION_TOO_LONG,
            f"Expression too long: {len(source)} characters (limit {limit})",
        )

    offsets = [i for i, c in enumerate(source) if not c.isspace()]
    text = "".join(source[i] for i in offsets)

    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        c = text[i]
        pos = offsets[i]

        # Numbers
        m = _NUMBER_RE.match(text, i)
        if m:
            tokens.append(Token(TokenKind.NUMBER, _parse_number(m.group(0)), pos))
            i = m.end()
            continue

        # Identifiers: functions win over variables
        m = _IDENT_RE.match(text, i)
        if m:
            word = m.group(0)
            kind = TokenKind.FUNCTION if is_function(word) else TokenKind.VARIABLE
            tokens.append(Token(kind, word, pos))
            i = m.end()
            continue

        if c in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, c, pos))
            i += 1
            continue

        if c in "()":
            tokens.append(Token(TokenKind.PAREN, c, pos))
            i += 1
            continue

        raise LexError(
            LexErrorKind.UNEXPECTED_CHARACTER,
            f"Unexpected character: {c!r}",
            pos=pos,
            char=c,
        )

    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return tokens
