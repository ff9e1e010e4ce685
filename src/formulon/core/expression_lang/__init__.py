"""
Formulon expression language.

Tokenizer, parser, evaluator, and variable extractor for calculator
expressions.

Usage:
    from formulon.core.expression_lang import evaluate, extract_variables

    extract_variables("x * 2 + y")
    # ['x', 'y']
    evaluate("x * 2 + y", {"x": 5, "y": 3})
    # 13.0
"""

from formulon.core.expression_lang.evaluator import evaluate, evaluate_expr, format_result
from formulon.core.expression_lang.functions import FUNCTION_NAMES, FUNCTION_TABLE
from formulon.core.expression_lang.parser import parse_expr
from formulon.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from formulon.core.expression_lang.variables import extract_variables

__all__ = [
    "FUNCTION_NAMES",
    "FUNCTION_TABLE",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_expr",
    "extract_variables",
    "format_result",
    "parse_expr",
    "tokenize",
]
