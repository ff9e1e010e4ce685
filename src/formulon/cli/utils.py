"""
Formulon CLI Utilities.

Shared utility functions used across CLI modules.
"""

from __future__ import annotations

import logging
import platform

import typer

from formulon.core.environment import get_settings

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get Formulon version from package metadata."""
    try:
        from importlib.metadata import version

        return version("formulon")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()
        settings = get_settings()

        typer.echo(f"Formulon {get_version()}")
        typer.echo(f"Python {python_version} ({python_impl})")
        typer.echo(f"Formula store: {settings.resolved_store_path}")
        limit = settings.max_expression_length
        typer.echo(f"Max expression length: {limit if limit else 'unlimited'}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for a CLI invocation."""
    level_name = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )


def parse_assignments(assignments: list[str] | None) -> dict[str, str]:
    """Split repeated ``name=value`` options into a dict of raw strings.

    Raises:
        typer.BadParameter: If an item has no "=" or an empty name.
    """
    values: dict[str, str] = {}
    for item in assignments or []:
        name, sep, raw = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(f"Expected name=value, got {item!r}", param_hint="--var")
        values[name] = raw.strip()
    return values


def parse_numeric_assignments(assignments: list[str] | None) -> dict[str, float]:
    """Like parse_assignments, but every value must be a number.

    Raises:
        typer.BadParameter: If a value is not a valid float.
    """
    values: dict[str, float] = {}
    for name, raw in parse_assignments(assignments).items():
        try:
            values[name] = float(raw)
        except ValueError:
            raise typer.BadParameter(
                f"Value for {name!r} is not a number: {raw!r}", param_hint="--var"
            ) from None
    return values
