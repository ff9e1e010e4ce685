"""
Expression CLI commands.

Evaluate, tokenize, and inspect one-off expressions.
"""

from __future__ import annotations

import typer

from formulon.cli.utils import parse_numeric_assignments
from formulon.cli_ui import print_error, print_result, render_tokens
from formulon.core.errors import ExpressionError
from formulon.core.expression_lang import (
    evaluate,
    extract_variables,
    format_result,
    parse_expr,
    tokenize,
)


def eval_command(
    expression: str = typer.Argument(help="Expression, e.g. 'x * 2 + sqrt(y)'"),
    var: list[str] | None = typer.Option(
        None, "--var", "-V", help="Variable value as name=value (repeatable)"
    ),
) -> None:
    """Evaluate an expression. Undefined arithmetic prints 'Error'."""
    variables = parse_numeric_assignments(var)
    try:
        result = evaluate(expression, variables)
    except ExpressionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_result(format_result(result))


def tokens_command(
    expression: str = typer.Argument(help="Expression to tokenize"),
) -> None:
    """Show the tokens an expression is split into."""
    try:
        tokens = tokenize(expression)
    except ExpressionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    render_tokens(tokens)


def vars_command(
    expression: str = typer.Argument(help="Expression to scan"),
) -> None:
    """List the free variables of an expression, sorted."""
    for name in extract_variables(expression):
        typer.echo(name)


def ast_command(
    expression: str = typer.Argument(help="Expression to parse"),
) -> None:
    """Print the fully parenthesised parse of an expression."""
    try:
        expr = parse_expr(expression)
    except ExpressionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    typer.echo(str(expr))
