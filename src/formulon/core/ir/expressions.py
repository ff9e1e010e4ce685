"""
Expression AST for Formulon.

Supports:
- Number literals: 42, 3.14, .5
- Variable references: x, rate, tax_2024
- Unary operators: -x, +x
- Binary operators: +, -, *, /, ^ (right-associative)
- Function calls with exactly one argument: sin(x), sqrt(a + b)
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class UnaryOp(StrEnum):
    """Prefix sign operators."""

    NEG = "-"
    POS = "+"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal. NaN marks a malformed numeral such as 1.2.3."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


class VariableRef(BaseModel):
    """Reference to a value supplied in the evaluation context."""

    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.op.value}{self.operand})"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class FuncCall(BaseModel):
    """
    Built-in function call: name(arg).

    Built-in functions: sin, cos, tan, ln, log (base 10), sqrt, abs.
    """

    name: str = Field(description="Function name")
    arg: Expr = Field(description="The single argument")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name}({self.arg})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | VariableRef | UnaryExpr | BinaryExpr | FuncCall

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
FuncCall.model_rebuild()
