"""Tests for the saved formulas store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from formulon.core.errors import FormulaStoreError
from formulon.core.formulas import (
    collect_variable_values,
    delete_formula,
    get_formula,
    load_formulas,
    make_formula,
    save_formula,
)
from formulon.core.ir.formulas import Formula


class TestMakeFormula:
    """make_formula records the expression's variables."""

    def test_variables_extracted(self) -> None:
        formula = make_formula("hypot", "sqrt(b ^ 2 + a ^ 2)")
        assert formula.variables == ["a", "b"]

    def test_name_and_expression_trimmed(self) -> None:
        formula = make_formula("  pay ", " rate * hours ")
        assert formula.name == "pay"
        assert formula.expression == "rate * hours"

    def test_invalid_expression_still_saved_without_variables(self) -> None:
        formula = make_formula("broken", "x @ y")
        assert formula.variables == []

    @pytest.mark.parametrize(("name", "expression"), [("", "1 + 1"), ("   ", "x"), ("n", "  ")])
    def test_blank_rejected(self, name: str, expression: str) -> None:
        with pytest.raises(FormulaStoreError):
            make_formula(name, expression)


class TestFormulaStore:
    """load/save/get/delete round through the JSON file."""

    def test_missing_file_is_empty(self, store_path: Path) -> None:
        assert load_formulas(store_path) == []

    def test_save_creates_file(self, store_path: Path) -> None:
        path = save_formula(store_path, make_formula("double", "x * 2"))
        assert path == store_path
        data = json.loads(store_path.read_text(encoding="utf-8"))
        assert data["version"] == "1.0"
        assert data["formulas"] == [
            {"name": "double", "expression": "x * 2", "variables": ["x"]}
        ]

    def test_save_appends_in_order(self, store_path: Path) -> None:
        save_formula(store_path, make_formula("a", "1"))
        save_formula(store_path, make_formula("b", "2"))
        assert [f.name for f in load_formulas(store_path)] == ["a", "b"]

    def test_save_replaces_same_name_in_place(self, store_path: Path) -> None:
        save_formula(store_path, make_formula("a", "x"))
        save_formula(store_path, make_formula("b", "y"))
        save_formula(store_path, make_formula("a", "z + 1"))

        formulas = load_formulas(store_path)
        assert [f.name for f in formulas] == ["a", "b"]
        assert formulas[0].expression == "z + 1"
        assert formulas[0].variables == ["z"]

    def test_get_formula(self, store_path: Path) -> None:
        save_formula(store_path, make_formula("area", "w * h"))
        formula = get_formula(store_path, "area")
        assert formula == Formula(name="area", expression="w * h", variables=["h", "w"])
        assert get_formula(store_path, "missing") is None

    def test_delete_formula(self, store_path: Path) -> None:
        save_formula(store_path, make_formula("a", "1"))
        save_formula(store_path, make_formula("b", "2"))

        assert delete_formula(store_path, "a") is True
        assert [f.name for f in load_formulas(store_path)] == ["b"]

    def test_delete_missing_formula(self, store_path: Path) -> None:
        save_formula(store_path, make_formula("a", "1"))
        assert delete_formula(store_path, "zzz") is False
        assert len(load_formulas(store_path)) == 1

    def test_corrupt_file_is_empty(
        self, store_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json", encoding="utf-8")
        assert load_formulas(store_path) == []
        assert "Failed to load formulas" in caplog.text

    def test_wrong_shape_is_empty(self, store_path: Path) -> None:
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({"formulas": [{"name": 1}]}), encoding="utf-8")
        assert load_formulas(store_path) == []

    def test_save_over_corrupt_file(self, store_path: Path) -> None:
        store_path.parent.mkdir(parents=True)
        store_path.write_text("garbage", encoding="utf-8")
        save_formula(store_path, make_formula("a", "1"))
        assert [f.name for f in load_formulas(store_path)] == ["a"]


class TestCollectVariableValues:
    """Form values: blank, missing, or non-numeric inputs read as 0."""

    def test_supplied_values(self) -> None:
        values = collect_variable_values(["x", "y"], {"x": "5", "y": "2.5"})
        assert values == {"x": 5.0, "y": 2.5}

    def test_missing_blank_and_invalid_become_zero(self) -> None:
        values = collect_variable_values(
            ["a", "b", "c", "d"], {"b": "", "c": "abc", "d": None}
        )
        assert values == {"a": 0.0, "b": 0.0, "c": 0.0, "d": 0.0}

    def test_nan_input_becomes_zero(self) -> None:
        assert collect_variable_values(["x"], {"x": "nan"}) == {"x": 0.0}

    def test_extra_inputs_ignored(self) -> None:
        assert collect_variable_values(["x"], {"x": 1.5, "y": "3"}) == {"x": 1.5}
