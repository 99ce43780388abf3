"""Data models for the calcsuite self-check driver.

Operation enums, CheckResult and SuiteResult — the typed structures that
flow through suite → report → CLI.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class MathOp(str, Enum):
    """Free arithmetic functions reachable from the CLI."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class TextOp(str, Enum):
    """String transforms reachable from the CLI."""

    REVERSE = "reverse"
    UPPER = "upper"
    LOWER = "lower"


@dataclass
class CheckResult:
    """Outcome of a single check."""

    section: str
    label: str
    passed: bool
    expected: Any = None
    actual: Any = None

    def to_dict(self) -> dict:
        return {
            "section": self.section,
            "label": self.label,
            "passed": self.passed,
            "expected": self.expected,
            "actual": self.actual,
        }

    @classmethod
    def from_dict(cls, d: dict) -> CheckResult:
        return cls(
            section=d.get("section", ""),
            label=d.get("label", ""),
            passed=d.get("passed", False),
            expected=d.get("expected"),
            actual=d.get("actual"),
        )


@dataclass
class SuiteResult:
    """Complete result of one suite run."""

    suite: str
    timestamp: str = ""
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for c in self.checks if c.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def total(self) -> int:
        return len(self.checks)

    @property
    def verdict(self) -> str:
        if self.total == 0:
            return "no-tests"
        if self.passed == self.total:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"

    @property
    def exit_code(self) -> int:
        """0 when every check passed, 1 otherwise."""
        return 0 if self.failed == 0 else 1

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "suite": self.suite,
            "timestamp": self.timestamp,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "verdict": self.verdict,
            "exit_code": self.exit_code,
            "checks": [c.to_dict() for c in self.checks],
        }

    @classmethod
    def from_dict(cls, d: dict) -> SuiteResult:
        """Deserialize from a JSON dict. Derived counts are recomputed."""
        return cls(
            suite=d.get("suite", ""),
            timestamp=d.get("timestamp", ""),
            checks=[CheckResult.from_dict(c) for c in d.get("checks", [])],
        )

    def save(self, path: Path) -> None:
        """Write the results as indented JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> Optional[SuiteResult]:
        """Load results written by save(); None if missing or unreadable."""
        if not path.exists():
            return None
        try:
            return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError):
            return None
