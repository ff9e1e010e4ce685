"""Core Formulon functionality: IR, expression language, settings, formula store."""

from . import ir
from .environment import FormulonSettings, get_settings
from .errors import (
    ExpressionError,
    FormulaStoreError,
    FormulonError,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
)
from .formulas import (
    collect_variable_values,
    delete_formula,
    get_formula,
    load_formulas,
    make_formula,
    save_formula,
)

__all__ = [
    "ir",
    # Settings
    "FormulonSettings",
    "get_settings",
    # Errors
    "ExpressionError",
    "FormulaStoreError",
    "FormulonError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    # Formula store
    "collect_variable_values",
    "delete_formula",
    "get_formula",
    "load_formulas",
    "make_formula",
    "save_formula",
]
