"""
Error types for Formulon expression scanning, parsing, and formula storage.

Structural problems are raised. Arithmetic domain failures (division by
zero, sqrt of a negative, log of a non-positive) are NOT errors: they
evaluate to NaN and are handled by the caller as an ordinary value.
"""

from __future__ import annotations

from enum import StrEnum


class FormulonError(Exception):
    """Base exception for all Formulon errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExpressionError(FormulonError):
    """Base for errors raised while turning an expression string into a value."""


class LexErrorKind(StrEnum):
    """Reasons the tokenizer rejects an input."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    EXPRESSION_TOO_LONG = "expression_too_long"


class LexError(ExpressionError):
    """
    Raised when an expression cannot be split into tokens.

    Attributes:
        kind: Why scanning stopped
        pos: 0-based offset into the original input
        char: The offending character (empty for EXPRESSION_TOO_LONG)
    """

    def __init__(self, kind: LexErrorKind, message: str, pos: int = 0, char: str = "") -> None:
        self.kind = kind
        self.pos = pos
        self.char = char
        super().__init__(message)


class ParseErrorKind(StrEnum):
    """Structural failures detected while parsing or resolving an expression."""

    UNDEFINED_VARIABLE = "undefined_variable"
    EXPECTED_OPEN_PAREN = "expected_open_paren"
    MISMATCHED_PARENS = "mismatched_parens"
    TRAILING_TOKENS = "trailing_tokens"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNEXPECTED_TOKEN = "unexpected_token"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(ExpressionError):
    """
    Raised when a token sequence is not a well-formed expression.

    Examples:
    - Function name not followed by "("
    - Missing ")"
    - Leftover tokens after a complete expression
    - Variable missing from the evaluation context

    Attributes:
        kind: Structural failure category
        detail: Extra context, e.g. the undefined variable's name
        pos: 0-based offset of the token involved, when known
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        detail: str = "",
        pos: int | None = None,
    ) -> None:
        self.kind = kind
        self.detail = detail
        self.pos = pos
        super().__init__(message)


class FormulaStoreError(FormulonError):
    """
    Raised when a formula cannot be stored.

    Examples:
    - Empty formula name
    - Empty expression
    """


def undefined_variable(name: str, pos: int | None = None) -> ParseError:
    """Helper to create the error for a variable missing from the context."""
    return ParseError(
        ParseErrorKind.UNDEFINED_VARIABLE,
        f"Undefined variable: {name}",
        detail=name,
        pos=pos,
    )
