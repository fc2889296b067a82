"""Rich output for calculation results and the history log."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from infixcalc.history import CalculationHistory
from infixcalc.models import Result


def format_number(value: float) -> str:
    """Format a result: integral values drop the trailing '.0'."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def render_result(result: Result, console: Console) -> None:
    """Print a value, or the generic error marker plus the specific message."""
    if result.ok:
        console.print(f"[bold green]{format_number(result.value)}[/bold green]")
        return
    console.print(f"[red]Error[/red]: {result.message} [dim]({result.kind.value})[/dim]")


def render_history(history: CalculationHistory, console: Console) -> None:
    """Render a Rich table of history entries, oldest first."""
    entries = history.all()
    if not entries:
        console.print("[yellow]No calculations yet.[/yellow]")
        return

    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Expression", min_width=20)
    table.add_column("Result", style="green", justify="right")
    table.add_column("Time", style="dim")

    for i, entry in enumerate(entries, start=1):
        table.add_row(str(i), entry.expression, format_number(entry.result), entry.timestamp)

    console.print(table)
