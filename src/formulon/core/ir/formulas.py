"""
Saved formula types for Formulon.

A formula is a named expression plus the free variables it referenced when
it was saved. Formulas are stored as JSON; see formulon.core.formulas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Formula(BaseModel):
    """
    A named, persisted expression.

    Attributes:
        name: Unique key within the store
        expression: Expression text, as typed
        variables: Sorted free variable names found in the expression
    """

    name: str = Field(description="Formula name (unique key)")
    expression: str = Field(description="Expression text")
    variables: list[str] = Field(default_factory=list, description="Free variable names")

    model_config = ConfigDict(frozen=True)


class FormulasContainer(BaseModel):
    """
    Root object stored in the formulas JSON file.

    Attributes:
        version: Schema version for future migrations
        formulas: Saved formulas in insertion order
    """

    version: str = Field(default="1.0", description="Schema version")
    formulas: list[Formula] = Field(default_factory=list, description="Saved formulas")

    model_config = ConfigDict(frozen=True)
