"""
Saved formula CLI commands.

Commands for saving, listing, running, and deleting named formulas.
"""

from __future__ import annotations

from pathlib import Path

import typer

from formulon.cli.utils import parse_assignments
from formulon.cli_ui import print_error, print_result, print_success, render_formulas
from formulon.core.environment import get_settings
from formulon.core.errors import ExpressionError, FormulaStoreError
from formulon.core.expression_lang import evaluate, format_result
from formulon.core.formulas import (
    collect_variable_values,
    delete_formula,
    get_formula,
    load_formulas,
    make_formula,
    save_formula,
)

formula_app = typer.Typer(help="Manage saved formulas", no_args_is_help=True)


@formula_app.callback()
def formula_callback(
    ctx: typer.Context,
    store: Path | None = typer.Option(  # noqa: B008
        None,
        "--store",
        "-s",
        help="Formulas JSON file (default: FORMULON_STORE or ~/.formulon/formulas.json)",
    ),
) -> None:
    """Select the formula store for the subcommand."""
    ctx.obj = store or get_settings().resolved_store_path


def _store(ctx: typer.Context) -> Path:
    return ctx.obj if isinstance(ctx.obj, Path) else get_settings().resolved_store_path


@formula_app.command("save")
def formula_save(
    ctx: typer.Context,
    name: str = typer.Argument(help="Formula name"),
    expression: str = typer.Argument(help="Expression text"),
) -> None:
    """Save a formula, replacing any formula with the same name."""
    try:
        formula = make_formula(name, expression)
    except FormulaStoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    path = save_formula(_store(ctx), formula)
    variables = ", ".join(formula.variables) or "none"
    print_success(f"Saved {formula.name} (variables: {variables}) to {path}")


@formula_app.command("list")
def formula_list(ctx: typer.Context) -> None:
    """List all saved formulas."""
    render_formulas(load_formulas(_store(ctx)))


@formula_app.command("show")
def formula_show(
    ctx: typer.Context,
    name: str = typer.Argument(help="Formula name"),
) -> None:
    """Show one saved formula."""
    formula = get_formula(_store(ctx), name)
    if formula is None:
        print_error(f"No formula named {name!r}")
        raise typer.Exit(code=1)

    typer.echo(f"Name:       {formula.name}")
    typer.echo(f"Expression: {formula.expression}")
    typer.echo(f"Variables:  {', '.join(formula.variables) or '-'}")


@formula_app.command("delete")
def formula_delete(
    ctx: typer.Context,
    name: str = typer.Argument(help="Formula name"),
) -> None:
    """Delete a saved formula."""
    if not delete_formula(_store(ctx), name):
        print_error(f"No formula named {name!r}")
        raise typer.Exit(code=1)
    print_success(f"Deleted {name}")


@formula_app.command("run")
def formula_run(
    ctx: typer.Context,
    name: str = typer.Argument(help="Formula name"),
    var: list[str] | None = typer.Option(
        None, "--var", "-V", help="Variable value as name=value; unset variables are 0"
    ),
) -> None:
    """Evaluate a saved formula with the given variable values."""
    formula = get_formula(_store(ctx), name)
    if formula is None:
        print_error(f"No formula named {name!r}")
        raise typer.Exit(code=1)

    values = collect_variable_values(formula.variables, parse_assignments(var))
    try:
        result = evaluate(formula.expression, values)
    except ExpressionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_result(format_result(result))
