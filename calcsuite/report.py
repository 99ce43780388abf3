"""calcsuite report — summary block and Rich tables for the self-check suite.

The summary mirrors the per-check lines: plain text when stdout is not a
terminal, colored verdict when it is.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcsuite.models import SuiteResult
from calcsuite.suite import Section

_SECTION_STYLES = {
    "mathops": "cyan",
    "calculator": "magenta",
    "utils": "yellow",
}


def render_summary(result: SuiteResult, console: Console) -> None:
    """Print the total/passed/failed block and the final verdict line."""
    console.print()
    console.print("=== Test Summary ===")
    console.print(f"Total tests: {result.total}")
    console.print(f"Passed: {result.passed}")
    console.print(f"Failed: {result.failed}")
    console.print()
    if result.failed == 0:
        console.print(f"[bold green]{escape('[SUCCESS]')}[/bold green] All tests passed!")
    else:
        console.print(f"[bold red]{escape('[FAILURE]')}[/bold red] Some tests failed!")


def render_checks(sections: list[Section], console: Console) -> None:
    """Render the check catalog as a Rich table without running it."""
    table = Table(title="Self-check Suite", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Section", min_width=10)
    table.add_column("Check", min_width=30)
    table.add_column("Expected", justify="right")

    n = 0
    for section in sections:
        style = _SECTION_STYLES.get(section.name, "white")
        for check in section.checks:
            n += 1
            table.add_row(
                str(n),
                f"[{style}]{section.name}[/{style}]",
                escape(check.label),
                escape(repr(check.expected)),
            )

    console.print()
    console.print(table)
    console.print()
