"""
Expression evaluator for the Formulon expression language.

Evaluates expression AST nodes against a mapping of variable values.
Pure evaluation: no I/O, no side effects, no Python eval().

Arithmetic follows IEEE-754 doubles. Undefined results are NaN, not errors:
division by zero, sqrt of a negative, ln/log of a non-positive value, and a
negative base raised to a non-integer power. NaN in any operand gives NaN.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from formulon.core.errors import ParseError, ParseErrorKind, undefined_variable
from formulon.core.expression_lang.functions import NAN, apply_function
from formulon.core.expression_lang.parser import parse_expr
from formulon.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)

logger = logging.getLogger(__name__)

# Magnitude from which results are shown in exponential notation
_EXPONENTIAL_THRESHOLD = 1e12


def evaluate(source: str, variables: Mapping[str, float]) -> float:
    """Parse and evaluate an expression string.

    Args:
        source: Expression string, e.g. "x * 2 + y"
        variables: Variable name -> value. Not modified.

    Returns:
        The result. NaN is a normal return value for undefined arithmetic.

    Raises:
        LexError: If the input contains a character no token can start with.
        ParseError: On malformed structure or a variable missing from
            ``variables``.
    """
    result = evaluate_expr(parse_expr(source), variables)
    logger.debug("Evaluated %r -> %r", source, result)
    return result


def evaluate_expr(expr: Expr, variables: Mapping[str, float]) -> float:
    """Evaluate a parsed expression against a variables mapping.

    This is a tree-walking interpreter over the closed set of AST node
    types; it does NOT use Python's eval().
    """
    try:
        return _interpret(expr, variables)
    except RecursionError:
        raise ParseError(
            ParseErrorKind.NESTING_TOO_DEEP,
            "Expression is nested too deeply",
        ) from None


def _interpret(expr: Expr, ctx: Mapping[str, float]) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, NumberLiteral):
        return expr.value

    if isinstance(expr, VariableRef):
        if expr.name not in ctx:
            raise undefined_variable(expr.name)
        return float(ctx[expr.name])

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, ctx)

    if isinstance(expr, UnaryExpr):
        operand = _interpret(expr.operand, ctx)
        return -operand if expr.op == UnaryOp.NEG else operand

    if isinstance(expr, FuncCall):
        return apply_function(expr.name, _interpret(expr.arg, ctx))

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr, ctx: Mapping[str, float]) -> float:
    """Evaluate a binary expression."""
    left = _interpret(expr.left, ctx)
    right = _interpret(expr.right, ctx)

    if math.isnan(left) or math.isnan(right):
        return NAN

    if expr.op == BinaryOp.ADD:
        return left + right
    if expr.op == BinaryOp.SUB:
        return left - right
    if expr.op == BinaryOp.MUL:
        return left * right
    if expr.op == BinaryOp.DIV:
        if right == 0:
            return NAN
        return left / right
    if expr.op == BinaryOp.POW:
        return _power(left, right)

    raise TypeError(f"Unknown binary op: {expr.op}")


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2) != 0


def _power(base: float, exponent: float) -> float:
    """IEEE pow: overflow gives infinity, 0 ^ negative gives infinity.

    math.pow raises where IEEE pow returns a value, so map those cases.
    0 ^ 0 is 1.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # Negative exponent; -0 ^ odd keeps the sign
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        # Negative base, fractional exponent
        return NAN


def format_result(value: float) -> str:
    """Render an evaluation result for display.

    NaN shows as "Error", integral values drop the ".0", and magnitudes of
    1e12 or more use 4-digit exponential notation.

    Examples:
        >>> format_result(14.0)
        '14'
        >>> format_result(float("nan"))
        'Error'
        >>> format_result(1234567890123.0)
        '1.2346e+12'
    """
    if math.isnan(value):
        return "Error"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= _EXPONENTIAL_THRESHOLD:
        return f"{value:.4e}"
    if value.is_integer():
        return str(int(value))
    return repr(value)
