"""
Formulon - calculator expression engine with saved formulas.

Tokenizes, parses, and evaluates arithmetic expressions with variables,
right-associative exponentiation, and a fixed set of math functions.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used names for convenience
from .core import ir
from .core.errors import ExpressionError, FormulonError, LexError, ParseError
from .core.expression_lang import evaluate, extract_variables, format_result, tokenize


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("formulon")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "ExpressionError",
    "FormulonError",
    "LexError",
    "ParseError",
    "evaluate",
    "extract_variables",
    "format_result",
    "tokenize",
]
