"""Comparison functions for integers, object identities and strings.

Equality functions return a bool. Ordering functions return -1, 0 or 1.
"""

from __future__ import annotations

__all__ = [
    "int_equal",
    "int_compare",
    "pointer_equal",
    "pointer_compare",
    "string_equal",
    "string_compare",
    "string_nocase_equal",
    "string_nocase_compare",
]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _sign(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def int_equal(a: int, b: int) -> bool:
    """Return True if the two integers are equal."""
    return a == b


def int_compare(a: int, b: int) -> int:
    """Order two integers: -1 if a < b, 1 if a > b, 0 if equal."""
    return _sign(a, b)


def pointer_equal(a: object, b: object) -> bool:
    """Return True if both arguments are the very same object."""
    return a is b


def pointer_compare(a: object, b: object) -> int:
    """Order two objects by identity; 0 only for the same object."""
    return _sign(id(a), id(b))


def string_equal(a: str, b: str) -> bool:
    """Return True if the two strings are identical, case included."""
    return a == b


def string_compare(a: str, b: str) -> int:
    """Order two strings by code point: -1, 0 or 1."""
    return _sign(a, b)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def string_nocase_compare(a: str, b: str) -> int:
    """Order two strings ignoring the case of ASCII letters: -1, 0 or 1."""
    return _sign(_ascii_lower(a), _ascii_lower(b))


def string_nocase_equal(a: str, b: str) -> bool:
    """Return True if the strings are equal ignoring the case of ASCII letters."""
    return string_nocase_compare(a, b) == 0