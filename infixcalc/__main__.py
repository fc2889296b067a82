"""CLI for the infixcalc expression evaluator.

Usage:
    python -m infixcalc eval "3+4*2"            # Print 11
    python -m infixcalc eval "-5+3"             # Leading minus needs no "--"
    python -m infixcalc eval "(2+3)*4" --postfix  # Also show the RPN form
    python -m infixcalc eval "4/0" --json       # Structured result
    python -m infixcalc postfix "3+4*2"         # Print "3 4 2 * +"
    python -m infixcalc repl                    # Interactive session with history
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console

from infixcalc import config
from infixcalc.engine import calculate, to_postfix
from infixcalc.history import CalculationHistory
from infixcalc.logging_config import configure_logging
from infixcalc.render import format_number, render_history, render_result

app = typer.Typer(
    name="infixcalc",
    help="Arithmetic expression evaluator (+ - * / and parentheses)",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Lets an expression such as "-5+3" through as the argument instead of an option.
_EXPRESSION_CONTEXT = {"ignore_unknown_options": True}
_REPL_HELP = ":history  show past results   :clear  forget them   :quit  leave"


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default from INFIXCALC_LOG_LEVEL)"
    ),
) -> None:
    """Arithmetic expression evaluator."""
    configure_logging(log_level or config.LOG_LEVEL)


@app.command("eval", context_settings=_EXPRESSION_CONTEXT)
def cmd_eval(
    expression: str = typer.Argument(help="Infix expression, e.g. '2+3*4'"),
    show_postfix: bool = typer.Option(False, "--postfix", "-p", help="Also print the postfix form"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Evaluate an expression and print the result."""
    result = calculate(expression)

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        if not result.ok:
            raise typer.Exit(1)
        return

    if not result.ok:
        render_result(result, err_console)
        raise typer.Exit(1)

    if show_postfix:
        console.print(f"[dim]postfix:[/dim] {to_postfix(expression).value}")
    render_result(result, console)


@app.command("postfix", context_settings=_EXPRESSION_CONTEXT)
def cmd_postfix(
    expression: str = typer.Argument(help="Infix expression, e.g. '2+3*4'"),
) -> None:
    """Print the postfix (Reverse Polish) form of an expression."""
    result = to_postfix(expression)
    if not result.ok:
        render_result(result, err_console)
        raise typer.Exit(1)
    console.print(result.value, highlight=False)


@app.command("repl")
def cmd_repl(
    max_history: int = typer.Option(
        config.MAX_HISTORY, "--max-history", min=1, help="Entries kept in the session history"
    ),
) -> None:
    """Evaluate expressions interactively, keeping a session history."""
    history = CalculationHistory(max_entries=max_history)
    console.print(f"[dim]{_REPL_HELP}[/dim]")

    while True:
        try:
            line = console.input("[bold]> [/bold]").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if not line:
            continue
        if line in (":quit", ":q"):
            break
        if line == ":history":
            render_history(history, console)
            continue
        if line == ":clear":
            history.clear()
            console.print("History cleared")
            continue

        result = calculate(line)
        render_result(result, console)
        if result.ok:
            history.push(line, result.value)

    if history.count():
        last = history.last()
        console.print(f"[dim]{history.count()} calculation(s), last: {last.expression} = {format_number(last.result)}[/dim]")


if __name__ == "__main__":
    app()
