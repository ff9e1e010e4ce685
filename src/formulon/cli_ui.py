"""
Rich output components for the Formulon CLI.

Styled status lines plus tables for tokens and saved formulas.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from formulon.core.expression_lang.tokenizer import Token, TokenKind
from formulon.core.ir.formulas import Formula

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "result": Style(color="bright_white", bold=True),
}

_TOKEN_STYLES = {
    TokenKind.NUMBER: "magenta",
    TokenKind.VARIABLE: "green",
    TokenKind.OPERATOR: "yellow",
    TokenKind.PAREN: "white",
    TokenKind.FUNCTION: "cyan",
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_result(display: str) -> None:
    """Print a formatted evaluation result ("Error" for NaN)."""
    style = STYLES["error"] if display == "Error" else STYLES["result"]
    console.print(Text(display, style=style))


def render_tokens(tokens: list[Token]) -> None:
    """Print a table of tokens: position, kind, value."""
    table = Table(title="Tokens", box=box.SIMPLE, header_style="bold")
    table.add_column("Pos", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Value")

    for tok in tokens:
        style = _TOKEN_STYLES.get(tok.kind, "white")
        table.add_row(str(tok.pos), Text(str(tok.kind), style=style), Text(str(tok.value)))

    console.print(table)


def render_formulas(formulas: list[Formula]) -> None:
    """Print a table of saved formulas."""
    if not formulas:
        console.print(Text("No saved formulas.", style=STYLES["muted"]))
        return

    table = Table(title="Saved Formulas", box=box.ROUNDED, header_style="bold")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Expression")
    table.add_column("Variables", style="cyan")

    for formula in formulas:
        table.add_row(
            Text(formula.name),
            Text(formula.expression),
            Text(", ".join(formula.variables) or "-"),
        )

    console.print(table)
