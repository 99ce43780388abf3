"""ASCII string transforms.

Each function returns a new string; inputs are never modified. Only the
ASCII letters ``a-z`` / ``A-Z`` are case-mapped, everything else passes
through unchanged.
"""

from __future__ import annotations

import string

# Fixed offset of 32 between 'a'..'z' and 'A'..'Z'
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def reverse(text: str) -> str:
    """Reverse character order by swapping pairs around the midpoint.

    For odd-length input the middle character stays in place.
    """
    chars = list(text)
    n = len(chars)
    for i in range(n // 2):
        chars[i], chars[n - i - 1] = chars[n - i - 1], chars[i]
    return "".join(chars)


def to_upper(text: str) -> str:
    """Map 'a'..'z' to 'A'..'Z'."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Map 'A'..'Z' to 'a'..'z'."""
    return text.translate(_TO_LOWER)
