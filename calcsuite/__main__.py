"""CLI for calcsuite.

Usage:
    python -m calcsuite                                  # Run the self-check suite
    python -m calcsuite run --output results.json        # Run and save results
    python -m calcsuite list                             # Show the fixed checks
    python -m calcsuite calc divide 10 0                 # Apply one arithmetic function
    python -m calcsuite text upper hello                 # Apply one string transform
    python -m calcsuite accumulate add:10.5 divide:0     # Drive a Calculator
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import typer
from rich.console import Console

from calcsuite import mathops, utils
from calcsuite.calculator import Calculator
from calcsuite.models import MathOp, TextOp
from calcsuite.report import render_checks, render_summary
from calcsuite.suite import build_sections, run_suite

app = typer.Typer(
    name="calcsuite",
    help="Arithmetic, accumulator and ASCII text helpers with a self-check suite",
)
out = Console(highlight=False)
console = Console(stderr=True)

_MATH_FUNCS = {
    MathOp.ADD: mathops.add,
    MathOp.SUBTRACT: mathops.subtract,
    MathOp.MULTIPLY: mathops.multiply,
    MathOp.DIVIDE: mathops.divide,
}

_TEXT_FUNCS = {
    TextOp.REVERSE: utils.reverse,
    TextOp.UPPER: utils.to_upper,
    TextOp.LOWER: utils.to_lower,
}


def _parse_number(raw: str) -> Union[int, float]:
    """Parse an operand as int when possible, float otherwise."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        console.print(f"[red]Not a number: {raw}[/red]")
        raise typer.Exit(1)


def _suite(output: Optional[Path]) -> None:
    result = run_suite(out)
    render_summary(result, out)
    if output:
        result.save(output)
        console.print(f"[dim]Results saved to {output}[/dim]")
    raise typer.Exit(result.exit_code)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Run the self-check suite when no command is given."""
    if ctx.invoked_subcommand is None:
        _suite(None)


@app.command("run")
def cmd_run(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write results as JSON to this path"),
) -> None:
    """Run the self-check suite and exit 0 only if every check passes."""
    _suite(output)


@app.command("list")
def cmd_list() -> None:
    """Show the fixed checks without running them."""
    render_checks(build_sections(), console)


@app.command("calc", context_settings={"ignore_unknown_options": True})
def cmd_calc(
    op: str = typer.Argument(metavar="OP", help="Operation: add, subtract, multiply, divide"),
    a: str = typer.Argument(metavar="A", help="Left operand"),
    b: str = typer.Argument(metavar="B", help="Right operand"),
) -> None:
    """Apply one free arithmetic function to two numbers."""
    try:
        m = MathOp(op)
    except ValueError:
        console.print(f"[red]Invalid operation: {op}[/red]. Choose: add, subtract, multiply, divide")
        raise typer.Exit(1)
    result = _MATH_FUNCS[m](_parse_number(a), _parse_number(b))
    out.print(str(result), markup=False, soft_wrap=True)


@app.command("text", context_settings={"ignore_unknown_options": True})
def cmd_text(
    op: str = typer.Argument(metavar="OP", help="Transform: reverse, upper, lower"),
    value: str = typer.Argument(metavar="TEXT", help="Text to transform"),
) -> None:
    """Apply one ASCII string transform."""
    try:
        t = TextOp(op)
    except ValueError:
        console.print(f"[red]Invalid transform: {op}[/red]. Choose: reverse, upper, lower")
        raise typer.Exit(1)
    out.print(_TEXT_FUNCS[t](value), markup=False, emoji=False, soft_wrap=True)


@app.command("accumulate")
def cmd_accumulate(
    steps: List[str] = typer.Argument(metavar="STEP...", help="Steps like add:10.5, divide:2 or clear, applied in order"),
) -> None:
    """Feed a sequence of steps through a fresh Calculator and print the result."""
    calc = Calculator()
    for step in steps:
        if step == "clear":
            calc.clear()
            continue
        name, sep, raw = step.partition(":")
        try:
            m = MathOp(name)
        except ValueError:
            m = None
        if not sep or m is None:
            console.print(f"[red]Invalid step: {step}[/red]. Use <op>:<value> or clear")
            raise typer.Exit(1)
        getattr(calc, m.value)(float(_parse_number(raw)))
    out.print(str(calc.get_result()), markup=False, soft_wrap=True)


if __name__ == "__main__":
    app()
