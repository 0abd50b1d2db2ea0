"""String inspection: length, comparison and searching."""

from __future__ import annotations

from .chartype import isspace


def _search_char(c: int | str) -> str:
    """Turn a character or byte code into the one-character string to look for."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def is_just_space(text: str) -> bool:
    """True when every character of text is whitespace; True for empty text."""
    return all(isspace(ch) for ch in text)


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string, so its
    index is len(text).
    """
    target = _search_char(c)
    if target == "\0":
        index = text.find(target)
        return len(text) if index < 0 else index
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _search_char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns 0 when equal, otherwise the difference between the codes of the
    first differing characters; the end of a string counts as code 0.
    """
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters of two strings.

    Returns 0 when n is 0 or the compared parts are equal, otherwise the
    difference between the codes of the first differing characters.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    for i in range(n):
        left = ord(s1[i]) if i < len(s1) else 0
        right = ord(s2[i]) if i < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find little in big, looking only at the first length characters.

    Returns the index where little starts, 0 when little is empty, or None
    when it does not lie wholly within that prefix.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    if length == 0:
        return None
    index = big.find(little, 0, length)
    return None if index < 0 else index