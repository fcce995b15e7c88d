"""Counting sequences and binary/decimal conversion."""

from __future__ import annotations


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    _check_non_negative(n)
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to ``n``."""
    _check_non_negative(n)
    return list(range(1, n + 1))


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    _check_non_negative(n)
    return format(n, "b")


def binary_to_decimal(digits: int | str) -> int:
    """Return the value of a binary number written with decimal digits 0 and 1."""
    if isinstance(digits, int) and digits < 0:
        raise ValueError(f"invalid binary number: {digits!r}")
    text = str(digits)
    if not text or any(ch not in "01" for ch in text):
        raise ValueError(f"invalid binary number: {digits!r}")
    return int(text, 2)