"""A small printf supporting %c, %s, %p, %d, %i, %u, %x, %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

DEC_BASE = "0123456789"
HEX_BASE_LOW = "0123456789abcdef"
HEX_BASE_HIGH = "0123456789ABCDEF"
POINTER_PREFIX = "0x"
NULL_DISPLAY = "(null)"
NIL_DISPLAY = "(nil)"
COLOUR_RESET = "\033[0m"

_INT_BITS = 32
_POINTER_MASK = 2**64 - 1
_MISSING = object()


def _digits(magnitude: int, base: str) -> str:
    """Spell a non-negative integer using the characters of base as digits."""
    if len(base) < 2:
        raise ValueError(f"base must hold at least two digits, got {base!r}")
    radix = len(base)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, radix)
        digits.append(base[digit])
        if magnitude == 0:
            break
    return "".join(reversed(digits))


def format_char(c: int | str) -> str:
    """Return the single character for c; an int is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def format_str(text: str | None) -> str:
    """Return text, or "(null)" when text is None."""
    return NULL_DISPLAY if text is None else text


def format_signed(number: int, base: str = DEC_BASE) -> str:
    """Spell number as a signed 32-bit integer in the given base."""
    half = 2 ** (_INT_BITS - 1)
    number = ((number + half) % 2**_INT_BITS) - half
    if number < 0:
        return "-" + _digits(-number, base)
    return _digits(number, base)


def format_unsigned(number: int, base: str = DEC_BASE) -> str:
    """Spell number as an unsigned 32-bit integer in the given base."""
    return _digits(number % 2**_INT_BITS, base)


def format_pointer(address: int | None, base: str = HEX_BASE_LOW) -> str:
    """Spell an address with a "0x" prefix, or "(nil)" for a null address."""
    if not address:
        return NIL_DISPLAY
    return POINTER_PREFIX + _digits(address & _POINTER_MASK, base)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda n: format_unsigned(n, HEX_BASE_LOW),
    "X": lambda n: format_unsigned(n, HEX_BASE_HIGH),
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    convert = _CONVERSIONS.get(spec)
    if convert is None:
        return ""
    arg = next(args, _MISSING)
    if arg is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return convert(arg)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the result.

    An unknown conversion produces nothing and consumes no argument.
    Raises ValueError when fmt ends with a lone '%' and TypeError when
    fmt is None or the arguments run out.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def printf_colour(colour: str | None, fmt: str, *args: Any) -> int:
    """Like printf, but wrapped in the colour sequence and a reset sequence.

    The returned length counts only the expanded format.
    """
    text = format_string(fmt, *args)
    sys.stdout.write(format_str(colour) + text + COLOUR_RESET)
    return len(text)