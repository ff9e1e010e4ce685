"""
Built-in unary functions for the Formulon expression language.

The table is closed: no user-defined functions. Every entry takes one float
and returns one float; inputs outside a function's domain give NaN rather
than raising.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from types import MappingProxyType

UnaryFn = Callable[[float], float]

NAN = float("nan")


def _ln(value: float) -> float:
    return NAN if value <= 0 else math.log(value)


def _log10(value: float) -> float:
    return NAN if value <= 0 else math.log10(value)


def _sqrt(value: float) -> float:
    return NAN if value < 0 else math.sqrt(value)


def _nan_on_domain_error(fn: UnaryFn) -> UnaryFn:
    """Wrap a math function so domain/range errors (e.g. sin(inf)) give NaN."""

    def wrapper(value: float) -> float:
        if math.isnan(value):
            return NAN
        try:
            return fn(value)
        except (ValueError, OverflowError):
            return NAN

    wrapper.__name__ = getattr(fn, "__name__", "fn")
    return wrapper


FUNCTION_TABLE: Mapping[str, UnaryFn] = MappingProxyType(
    {
        "sin": _nan_on_domain_error(math.sin),
        "cos": _nan_on_domain_error(math.cos),
        "tan": _nan_on_domain_error(math.tan),
        "ln": _nan_on_domain_error(_ln),
        "log": _nan_on_domain_error(_log10),
        "sqrt": _nan_on_domain_error(_sqrt),
        "abs": _nan_on_domain_error(math.fabs),
    }
)

FUNCTION_NAMES: frozenset[str] = frozenset(FUNCTION_TABLE)


def is_function(name: str) -> bool:
    """True if *name* is a built-in function (and so never a variable)."""
    return name in FUNCTION_TABLE


def apply_function(name: str, value: float) -> float:
    """Apply the built-in function *name* to *value*.

    Raises:
        KeyError: If *name* is not in FUNCTION_TABLE. The tokenizer only
            emits FUNCTION tokens for known names, so this means a
            hand-built AST is wrong.
    """
    return FUNCTION_TABLE[name](value)
