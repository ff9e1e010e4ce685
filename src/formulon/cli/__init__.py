"""
Formulon CLI Package.

- expr.py: eval, tokens, vars, ast commands
- formulas.py: saved formula commands (formula save/list/show/run/delete)
- utils.py: shared utilities
"""

from __future__ import annotations

import typer

from formulon.cli.expr import ast_command, eval_command, tokens_command, vars_command
from formulon.cli.formulas import formula_app
from formulon.cli.utils import configure_logging, get_version, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""Formulon – calculator expressions with variables and saved formulas

Examples:
  formulon eval "2 + 3 * 4"
  formulon eval "x * 2 + y" --var x=5 --var y=3
  formulon formula save pay "rate * hours"
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and configuration information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Formulon CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="vars")(vars_command)
app.command(name="ast")(ast_command)
app.add_typer(formula_app, name="formula")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the formulon console script."""
    app(args=argv)


__all__ = [
    "__version__",
    "app",
    "main",
    "formula_app",
    "get_version",
    "version_callback",
]
