"""
Formulon intermediate representation types.

Expression AST nodes and saved-formula models, re-exported for convenience.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)
from .formulas import Formula, FormulasContainer

__all__ = [
    # Expressions
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "FuncCall",
    "NumberLiteral",
    "UnaryExpr",
    "UnaryOp",
    "VariableRef",
    # Formulas
    "Formula",
    "FormulasContainer",
]
