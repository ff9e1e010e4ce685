"""
Saved formulas persistence layer.

Formulas live in a single JSON document (default ~/.formulon/formulas.json).
Saving under an existing name replaces that entry in place.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import ValidationError

from .errors import FormulaStoreError
from .expression_lang.variables import extract_variables
from .ir.formulas import Formula, FormulasContainer

logger = logging.getLogger(__name__)


def make_formula(name: str, expression: str) -> Formula:
    """Build a Formula, recording the expression's free variables.

    Raises:
        FormulaStoreError: If the name or expression is blank.
    """
    name = name.strip()
    expression = expression.strip()
    if not name:
        raise FormulaStoreError("Formula name must not be empty")
    if not expression:
        raise FormulaStoreError("Formula expression must not be empty")
    return Formula(name=name, expression=expression, variables=extract_variables(expression))


def load_formulas(store_path: Path) -> list[Formula]:
    """Load all saved formulas.

    Args:
        store_path: Path to the formulas JSON file.

    Returns:
        Saved formulas in insertion order. Returns an empty list if the file
        doesn't exist or can't be read.
    """
    if not store_path.exists():
        return []

    try:
        data = json.loads(store_path.read_text(encoding="utf-8"))
        container = FormulasContainer.model_validate(data)
        return list(container.formulas)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        # Log error but return empty list so the store stays usable
        logger.warning("Failed to load formulas from %s: %s", store_path, e)
        return []


def _write_formulas(store_path: Path, formulas: list[Formula]) -> Path:
    store_path.parent.mkdir(parents=True, exist_ok=True)
    container = FormulasContainer(formulas=formulas)
    store_path.write_text(
        json.dumps(container.model_dump(mode="json"), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return store_path


def save_formula(store_path: Path, formula: Formula) -> Path:
    """Save a formula, replacing any existing formula with the same name.

    Returns:
        Path to the written formulas file.
    """
    formulas = load_formulas(store_path)
    for i, existing in enumerate(formulas):
        if existing.name == formula.name:
            formulas[i] = formula
            break
    else:
        formulas.append(formula)

    path = _write_formulas(store_path, formulas)
    logger.info("Saved formula %r to %s", formula.name, path)
    return path


def get_formula(store_path: Path, name: str) -> Formula | None:
    """Return the saved formula called *name*, or None."""
    for formula in load_formulas(store_path):
        if formula.name == name:
            return formula
    return None


def delete_formula(store_path: Path, name: str) -> bool:
    """Delete a formula by name.

    Returns:
        True if a formula was removed.
    """
    formulas = load_formulas(store_path)
    remaining = [f for f in formulas if f.name != name]
    if len(remaining) == len(formulas):
        return False

    _write_formulas(store_path, remaining)
    logger.info("Deleted formula %r from %s", name, store_path)
    return True


def collect_variable_values(
    names: Iterable[str],
    supplied: Mapping[str, str | float | None],
) -> dict[str, float]:
    """Build the evaluation context for a formula's input form.

    Every name gets a value. Blank, missing, or non-numeric inputs count as
    0, the way an empty input field with placeholder "0" reads.
    """
    values: dict[str, float] = {}
    for name in names:
        raw = supplied.get(name)
        try:
            value = float(raw) if raw is not None and str(raw).strip() else 0.0
        except ValueError:
            value = 0.0
        values[name] = 0.0 if math.isnan(value) else value
    return values
