"""
Free-variable extraction for live input forms.

Runs the tokenizer only, never the parser, so half-typed expressions such as
"x * (y +" still report their variables.
"""

from __future__ import annotations

from formulon.core.errors import LexError
from formulon.core.expression_lang.tokenizer import TokenKind, tokenize


def extract_variables(source: str) -> list[str]:
    """Return the sorted, de-duplicated variable names in an expression.

    Function names are excluded. Input the tokenizer rejects yields an empty
    list instead of an error.

    Examples:
        >>> extract_variables("sin(x) + cos(y) * x")
        ['x', 'y']
        >>> extract_variables("@@@")
        []
    """
    try:
        tokens = tokenize(source)
    except LexError:
        return []
    return sorted({str(tok.value) for tok in tokens if tok.kind == TokenKind.VARIABLE})
