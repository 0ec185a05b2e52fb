"""Conversions between integers and their decimal text."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "uitoa", "number_length"]

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional ``+`` or ``-`` sign is
    read, then as many ASCII digits as follow. Anything after that is
    ignored. Text without digits gives 0.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < length and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' if negative."""
    return str(n)


def uitoa(n: int) -> str:
    """Return the decimal text of an unsigned integer.

    Zero has no significant digits and yields the empty string.
    """
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return str(n) if n else ""


def number_length(n: int) -> int:
    """Return how many characters the decimal text of ``n`` takes, sign included."""
    length = 1 if n <= 0 else 0
    n = abs(n)
    while n:
        n //= 10
        length += 1
    return length