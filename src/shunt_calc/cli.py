"""
Command-line interface for shunt-calc.

Provides commands for:
- Evaluating an expression
- Showing the postfix form of an expression
- Running the sample expressions
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shunt_calc.config import configure_logging, load_settings
from shunt_calc.engine import SAMPLE_EXPRESSIONS, Engine
from shunt_calc.errors import ExpressionError
from shunt_calc.models import ErrorDetail, EvaluationMode

app = typer.Typer(
    name="shunt",
    help="shunt-calc - Shunting-Yard infix expression evaluator",
    add_completion=False,
)

console = Console()

MODE_OPTION = typer.Option(None, "--mode", "-m", help="Evaluation mode: legacy or standard")
SHORTCUT_OPTION = typer.Option(
    None,
    "--shortcut/--no-shortcut",
    help="Return the lone operand when an operator has nothing to pair with",
)
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="YAML configuration file")


def _build_engine(
    mode: Optional[EvaluationMode],
    shortcut: Optional[bool],
    config: Optional[Path],
) -> Engine:
    """Resolve settings for a command and build its engine."""
    try:
        resolved = load_settings(config, mode=mode, single_operand_shortcut=shortcut)
    except ValueError as e:
        console.print(f"[red]✗ Invalid configuration:[/] {escape(str(e))}")
        raise typer.Exit(2)
    configure_logging(resolved.log_level)
    return Engine(resolved.mode, resolved.single_operand_shortcut)


def _format_value(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Beyond the interpreter's int-to-str digit limit
        return f"<{value.bit_length()}-bit integer, too large to print>"


def _print_failure(error: ErrorDetail) -> None:
    location = f" at position {error.position}" if error.position is not None else ""
    console.print(f"[red]✗ {error.kind.value}{location}:[/] {escape(error.message)}")


# =============================================================================
# Expression Commands
# =============================================================================

@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help='Expression, e.g. "( 1 + 3 ) * 2"'),
    mode: Optional[EvaluationMode] = MODE_OPTION,
    shortcut: Optional[bool] = SHORTCUT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the full report as JSON"),
):
    """Evaluate an infix expression."""
    engine = _build_engine(mode, shortcut, config)
    report = engine.run(expression)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    elif report.success:
        console.print(f"[green]{escape(_format_value(report.value))}[/]")
    else:
        _print_failure(report.error)

    if not report.success:
        raise typer.Exit(1)


@app.command()
def postfix(
    expression: str = typer.Argument(..., help='Expression, e.g. "( 1 + 3 ) * 2"'),
    mode: Optional[EvaluationMode] = MODE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Show the postfix (RPN) form of an infix expression."""
    engine = _build_engine(mode, None, config)
    try:
        tokens = engine.to_postfix(expression)
    except ExpressionError as e:
        _print_failure(e.to_detail())
        raise typer.Exit(1)

    console.print(" ".join(tokens))


@app.command()
def demo(
    mode: Optional[EvaluationMode] = MODE_OPTION,
    shortcut: Optional[bool] = SHORTCUT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Evaluate the built-in sample expressions."""
    engine = _build_engine(mode, shortcut, config)
    reports = engine.run_many(SAMPLE_EXPRESSIONS)

    table = Table(title=f"Sample Expressions ({engine.mode.value})")
    table.add_column("Expression", style="cyan")
    table.add_column("Postfix", style="magenta")
    table.add_column("Result")

    for report in reports:
        table.add_row(
            report.expression,
            " ".join(report.postfix) if report.postfix is not None else "-",
            f"[green]{escape(_format_value(report.value))}[/]" if report.success else f"[red]{report.error.kind.value}[/]",
        )

    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
