"""Character classification and case conversion restricted to ASCII."""

from __future__ import annotations

from typing import overload

_SPACE_CODES = frozenset({ord(" "), 9, 10, 11, 12, 13})


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isalpha(c: int | str) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def isspace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACE_CODES


def isnumeric(text: str) -> bool:
    """True when text is an optional sign followed only by ASCII digits.

    A bare sign and the empty string count as numeric.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(isdigit(ch) for ch in body)


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...
def tolower(c):
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...
def toupper(c):
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code