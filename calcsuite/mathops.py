"""Stateless arithmetic over two operands.

``divide`` never raises: a zero divisor yields ``0.0``.
"""

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    """Return ``a / b``, or ``0.0`` when ``b`` is zero."""
    if b == 0:
        return 0.0
    return a / b
