"""
Runtime configuration for Formulon.

Settings are resolved once per process, in this order:
1. Environment variables (FORMULON_*)
2. formulon.toml in the current working directory
3. Built-in defaults

Environment values:
    FORMULON_MAX_EXPRESSION_LENGTH  Longest accepted expression; 0 disables the check
    FORMULON_STORE                  Path of the saved-formulas JSON file
    FORMULON_LOG_LEVEL              Logging level name (DEBUG, INFO, WARNING, ...)

Example formulon.toml:

    [engine]
    max_expression_length = 2000

    [store]
    path = "~/.config/formulon/formulas.json"

    [logging]
    level = "INFO"

Usage:
    from formulon.core.environment import get_settings

    settings = get_settings()
    settings.max_expression_length  # 10000 unless overridden
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPRESSION_LENGTH = 10_000
DEFAULT_LOG_LEVEL = "WARNING"
CONFIG_FILE = "formulon.toml"

MAX_EXPRESSION_LENGTH_VAR = "FORMULON_MAX_EXPRESSION_LENGTH"
STORE_VAR = "FORMULON_STORE"
LOG_LEVEL_VAR = "FORMULON_LOG_LEVEL"


def default_store_path() -> Path:
    """Default location of the saved-formulas file (~/.formulon/formulas.json)."""
    return Path.home() / ".formulon" / "formulas.json"


@dataclass(frozen=True)
class FormulonSettings:
    """Resolved settings shared by the engine, the formula store, and the CLI."""

    max_expression_length: int = DEFAULT_MAX_EXPRESSION_LENGTH
    store_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def resolved_store_path(self) -> Path:
        return self.store_path or default_store_path()


def _load_config_file(path: Path) -> dict[str, Any]:
    """Read formulon.toml; a missing or broken file counts as empty."""
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}


def _parse_length(raw: Any, source: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid max_expression_length %r from %s. Using default %d.",
            raw,
            source,
            DEFAULT_MAX_EXPRESSION_LENGTH,
        )
        return DEFAULT_MAX_EXPRESSION_LENGTH
    if value < 0:
        logger.warning(
            "Negative max_expression_length %d from %s. Using default %d.",
            value,
            source,
            DEFAULT_MAX_EXPRESSION_LENGTH,
        )
        return DEFAULT_MAX_EXPRESSION_LENGTH
    return value


def load_settings(config_path: Path | None = None) -> FormulonSettings:
    """Build settings from the environment and an optional formulon.toml.

    Args:
        config_path: Explicit config file. Defaults to ./formulon.toml.

    Returns:
        FormulonSettings with environment overrides applied.
    """
    data = _load_config_file(config_path or Path.cwd() / CONFIG_FILE)
    engine = data.get("engine", {})
    store = data.get("store", {})
    logging_section = data.get("logging", {})

    max_length = DEFAULT_MAX_EXPRESSION_LENGTH
    if "max_expression_length" in engine:
        max_length = _parse_length(engine["max_expression_length"], CONFIG_FILE)
    env_length = os.environ.get(MAX_EXPRESSION_LENGTH_VAR, "").strip()
    if env_length:
        max_length = _parse_length(env_length, MAX_EXPRESSION_LENGTH_VAR)

    store_path: Path | None = None
    if store.get("path"):
        store_path = Path(str(store["path"])).expanduser()
    env_store = os.environ.get(STORE_VAR, "").strip()
    if env_store:
        store_path = Path(env_store).expanduser()

    log_level = str(logging_section.get("level", DEFAULT_LOG_LEVEL))
    env_level = os.environ.get(LOG_LEVEL_VAR, "").strip()
    if env_level:
        log_level = env_level

    return FormulonSettings(
        max_expression_length=max_length,
        store_path=store_path,
        log_level=log_level.upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> FormulonSettings:
    """Process-wide settings. Call get_settings.cache_clear() to re-read."""
    return load_settings()
