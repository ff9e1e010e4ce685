"""Shared pytest fixtures for Formulon tests."""

from pathlib import Path

import pytest

from formulon.core.environment import (
    LOG_LEVEL_VAR,
    MAX_EXPRESSION_LENGTH_VAR,
    STORE_VAR,
    get_settings,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test with default settings and no user config file."""
    for var in (MAX_EXPRESSION_LENGTH_VAR, STORE_VAR, LOG_LEVEL_VAR):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Return a formulas file path inside the test's temp directory."""
    return tmp_path / "store" / "formulas.json"
