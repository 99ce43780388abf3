"""Tests for the ASCII string transforms."""

import pytest

from calcsuite import utils


# --- reverse ---

def test_reverse():
    assert utils.reverse("hello") == "olleh"


def test_reverse_empty():
    assert utils.reverse("") == ""


def test_reverse_single_char():
    assert utils.reverse("a") == "a"


def test_reverse_odd_length_keeps_middle():
    assert utils.reverse("abcde") == "edcba"
    assert utils.reverse("abcde")[2] == "c"


def test_reverse_even_length():
    assert utils.reverse("abcd") == "dcba"


def test_reverse_twice_is_identity():
    assert utils.reverse(utils.reverse("Hello, World!")) == "Hello, World!"


def test_reverse_leaves_input_untouched():
    s = "stable"
    utils.reverse(s)
    assert s == "stable"


# --- to_upper / to_lower ---

def test_to_upper():
    assert utils.to_upper("hello") == "HELLO"


def test_to_upper_non_letters_unchanged():
    assert utils.to_upper("a1-b_2 c!") == "A1-B_2 C!"


def test_to_upper_idempotent():
    assert utils.to_upper("HELLO") == "HELLO"


def test_to_lower():
    assert utils.to_lower("WORLD") == "world"


def test_to_lower_idempotent():
    assert utils.to_lower("world") == "world"


def test_to_lower_non_letters_unchanged():
    assert utils.to_lower("A1-B_2 C!") == "a1-b_2 c!"


def test_empty_input():
    assert utils.to_upper("") == ""
    assert utils.to_lower("") == ""


def test_only_ascii_letters_are_mapped():
    assert utils.to_upper("straße é") == "STRAßE é"
    assert utils.to_lower("ÉCOLE") == "École"


@pytest.mark.parametrize("s", ["hello", "WORLD", "MiXeD", "a", "Zz"])
def test_lower_after_upper(s):
    assert utils.to_lower(utils.to_upper(s)) == utils.to_lower(s)
