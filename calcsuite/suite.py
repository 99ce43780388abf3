"""Self-check suite — builds the fixed checks, runs them, prints each outcome.

Data flow per run:
1. Build the check catalog (fresh Calculator per build)
2. Print the header
3. For each section: print its title, then evaluate each check in order
   and print a [PASS]/[FAIL] line
4. Assemble SuiteResult; the CLI renders the summary and exit status
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from calcsuite import mathops, utils
from calcsuite.calculator import Calculator
from calcsuite.models import CheckResult, SuiteResult

SUITE_NAME = "Calculator Test Suite"


@dataclass
class Check:
    """One comparison of a computed value against a literal."""

    label: str
    fail_label: str
    expected: Any
    compute: Callable[[], Any]

    def evaluate(self) -> tuple[bool, Any]:
        """Run the computation. Returns (passed, actual)."""
        actual = self.compute()
        return actual == self.expected, actual


@dataclass
class Section:
    """An ordered group of checks printed under one title."""

    name: str
    title: str
    checks: list[Check] = field(default_factory=list)

    def expect(self, expr: str, expected: Any, compute: Callable[[], Any], shown: str = "") -> None:
        """Append an ``expr = shown`` / ``expr != shown`` check."""
        shown = shown or repr(expected)
        self.checks.append(Check(
            label=f"{expr} = {shown}",
            fail_label=f"{expr} != {shown}",
            expected=expected,
            compute=compute,
        ))


def _step(calc: Calculator, op: Callable[[float], None], value: float) -> Callable[[], float]:
    """Deferred accumulator step: apply ``op(value)`` then read the register."""
    def run() -> float:
        op(value)
        return calc.get_result()
    return run


def _mathops_section() -> Section:
    s = Section("mathops", "Testing mathops functions...")
    s.expect("mathops.add(5, 3)", 8, lambda: mathops.add(5, 3))
    s.expect("mathops.add(-5, 3)", -2, lambda: mathops.add(-5, 3))
    s.expect("mathops.subtract(10, 3)", 7, lambda: mathops.subtract(10, 3))
    s.expect("mathops.multiply(4, 5)", 20, lambda: mathops.multiply(4, 5))
    s.expect("mathops.divide(10, 2)", 5.0, lambda: mathops.divide(10, 2))
    s.checks.append(Check(
        label="mathops.divide(10, 0) returns 0.0 (safe)",
        fail_label="mathops.divide(10, 0) doesn't handle zero safely",
        expected=0.0,
        compute=lambda: mathops.divide(10, 0),
    ))
    return s


def _calculator_section() -> Section:
    # Checks share one instance and must run in order
    calc = Calculator()
    s = Section("calculator", "Testing Calculator class...")
    s.checks.append(Check(
        label="Calculator initialized to 0.0",
        fail_label="Calculator not initialized to 0.0",
        expected=0.0,
        compute=calc.get_result,
    ))
    s.expect("Calculator.add(10.5)", 10.5, _step(calc, calc.add, 10.5))
    s.expect("Calculator.subtract(5.5)", 5.0, _step(calc, calc.subtract, 5.5))
    s.expect("Calculator.multiply(2.0)", 10.0, _step(calc, calc.multiply, 2.0))
    s.expect("Calculator.divide(5.0)", 2.0, _step(calc, calc.divide, 5.0))

    def clear() -> float:
        calc.clear()
        return calc.get_result()

    s.checks.append(Check(
        label="Calculator.clear() resets to 0.0",
        fail_label="Calculator.clear() doesn't reset to 0.0",
        expected=0.0,
        compute=clear,
    ))
    return s


def _utils_section() -> Section:
    s = Section("utils", "Testing utils functions...")
    s.expect('utils.reverse("hello")', "olleh", lambda: utils.reverse("hello"), shown='"olleh"')
    s.expect('utils.to_upper("hello")', "HELLO", lambda: utils.to_upper("hello"), shown='"HELLO"')
    s.expect('utils.to_lower("WORLD")', "world", lambda: utils.to_lower("WORLD"), shown='"world"')
    return s


def build_sections() -> list[Section]:
    """Build the fixed check catalog in run order."""
    return [_mathops_section(), _calculator_section(), _utils_section()]


def run_suite(
    console: Console,
    sections: list[Section] | None = None,
) -> SuiteResult:
    """Evaluate every check in order, printing one line per check.

    Args:
        console: Rich Console the report lines are printed to.
        sections: Catalog to run. Defaults to a fresh build_sections().

    Returns:
        SuiteResult holding one CheckResult per check.
    """
    if sections is None:
        sections = build_sections()

    result = SuiteResult(
        suite=SUITE_NAME,
        timestamp=datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ"),
    )

    console.print(f"=== {SUITE_NAME} ===")
    for section in sections:
        console.print()
        console.print(escape(section.title))
        for check in section.checks:
            passed, actual = check.evaluate()
            if passed:
                console.print(f"  [green]{escape('[PASS]')}[/green] {escape(check.label)}")
            else:
                console.print(f"  [red]{escape('[FAIL]')}[/red] {escape(check.fail_label)}")
            result.checks.append(CheckResult(
                section=section.name,
                label=check.label,
                passed=passed,
                expected=check.expected,
                actual=actual,
            ))

    return result
