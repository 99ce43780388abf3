"""Tests for the free arithmetic functions.

Division by zero returns 0.0 instead of raising.
"""

import pytest

from calcsuite import mathops


# --- Integer arithmetic ---

def test_add():
    assert mathops.add(5, 3) == 8


def test_add_negative():
    assert mathops.add(-5, 3) == -2


def test_subtract():
    assert mathops.subtract(10, 3) == 7


def test_multiply():
    assert mathops.multiply(4, 5) == 20


def test_float_operands():
    assert mathops.add(0.5, 0.25) == 0.75
    assert mathops.multiply(2.5, 4) == 10.0


# --- Division ---

@pytest.mark.parametrize("a,b", [(10, 2), (7, 2), (-9, 3), (1.5, 0.5), (1, 3)])
def test_divide_matches_true_division(a, b):
    assert mathops.divide(a, b) == a / b


def test_divide_exact():
    assert mathops.divide(10, 2) == 5.0


def test_divide_by_zero_returns_zero():
    assert mathops.divide(10, 0) == 0.0


def test_divide_by_float_zero_returns_zero():
    assert mathops.divide(-3.5, 0.0) == 0.0


def test_divide_zero_numerator():
    assert mathops.divide(0, 5) == 0.0
