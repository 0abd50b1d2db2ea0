"""Conversion between decimal text and integers."""

from __future__ import annotations

from .chartype import isdigit, isspace


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped, a single '+' or '-' is honoured, and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and isdigit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of n, with a leading '-' if negative."""
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))