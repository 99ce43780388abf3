"""Accumulator calculator holding a single running float."""

from __future__ import annotations


class Calculator:
    """Running register mutated in place by sequential operations.

    Starts at 0.0. Dividing by zero leaves the register untouched, unlike
    ``mathops.divide`` which returns 0.0 for a zero divisor.
    """

    def __init__(self):
        self._result: float = 0.0

    def add(self, value: float) -> None:
        self._result += value

    def subtract(self, value: float) -> None:
        self._result -= value

    def multiply(self, value: float) -> None:
        self._result *= value

    def divide(self, value: float) -> None:
        if value != 0:
            self._result /= value

    def clear(self) -> None:
        """Reset the register to 0.0."""
        self._result = 0.0

    def get_result(self) -> float:
        return self._result
