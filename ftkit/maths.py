"""Small integer and floating-point helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def absolute(nb: int) -> int:
    """Return the absolute value of nb."""
    return -nb if nb < 0 else nb


def square(x: float) -> float:
    """Return x multiplied by itself."""
    return x * x


def minimum(a: int, b: int) -> int:
    """Return the smaller of a and b; b when they are equal."""
    return a if a < b else b


def maximum(a: int, b: int) -> int:
    """Return the larger of a and b; a when they are equal."""
    return a if a >= b else b


def swap(a: T, b: U) -> tuple[U, T]:
    """Return the pair with its two members exchanged."""
    return b, a