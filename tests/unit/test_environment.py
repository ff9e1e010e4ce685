"""Tests for settings resolution (environment, formulon.toml, defaults)."""

from __future__ import annotations

from pathlib import Path

import pytest

from formulon.core.environment import (
    DEFAULT_MAX_EXPRESSION_LENGTH,
    FormulonSettings,
    default_store_path,
    get_settings,
    load_settings,
)
from formulon.core.errors import LexError
from formulon.core.expression_lang import evaluate, extract_variables


class TestDefaults:
    def test_defaults_without_config(self) -> None:
        settings = load_settings()
        assert settings == FormulonSettings()
        assert settings.max_expression_length == DEFAULT_MAX_EXPRESSION_LENGTH
        assert settings.resolved_store_path == default_store_path()
        assert settings.log_level == "WARNING"


class TestConfigFile:
    def test_reads_formulon_toml(self, tmp_path: Path) -> None:
        (tmp_path / "formulon.toml").write_text(
            """
[engine]
max_expression_length = 50

[store]
path = "data/formulas.json"

[logging]
level = "info"
""",
            encoding="utf-8",
        )
        settings = load_settings()
        assert settings.max_expression_length == 50
        assert settings.store_path == Path("data/formulas.json")
        assert settings.log_level == "INFO"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text("[engine]\nmax_expression_length = 0\n", encoding="utf-8")
        assert load_settings(config).max_expression_length == 0

    def test_broken_toml_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "formulon.toml").write_text("[engine\n", encoding="utf-8")
        assert load_settings() == FormulonSettings()

    def test_invalid_length_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "formulon.toml").write_text(
            '[engine]\nmax_expression_length = "lots"\n', encoding="utf-8"
        )
        assert load_settings().max_expression_length == DEFAULT_MAX_EXPRESSION_LENGTH


class TestEnvironmentOverrides:
    def test_environment_beats_config_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "formulon.toml").write_text(
            "[engine]\nmax_expression_length = 50\n", encoding="utf-8"
        )
        monkeypatch.setenv("FORMULON_MAX_EXPRESSION_LENGTH", "5")
        monkeypatch.setenv("FORMULON_STORE", str(tmp_path / "f.json"))
        monkeypatch.setenv("FORMULON_LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.max_expression_length == 5
        assert settings.store_path == tmp_path / "f.json"
        assert settings.log_level == "DEBUG"

    def test_negative_length_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORMULON_MAX_EXPRESSION_LENGTH", "-1")
        assert load_settings().max_expression_length == DEFAULT_MAX_EXPRESSION_LENGTH

    def test_ceiling_applies_to_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORMULON_MAX_EXPRESSION_LENGTH", "5")
        get_settings.cache_clear()

        assert evaluate("1 + 2", {}) == 3
        with pytest.raises(LexError):
            evaluate("1 + 2 + 3", {})
        assert extract_variables("a + b + c") == []
