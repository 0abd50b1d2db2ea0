"""Building new strings: joining, splitting, trimming, bounded copies and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def concat(*args: str) -> str:
    """Return all the given strings joined end to end."""
    return "".join(args)


def split(text: str, sep: str) -> list[str]:
    """Split text on the single character sep, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    entries.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)} characters")
    return [word for word in text.split(sep) if word]


def strdup(text: str) -> str:
    """Return a copy of text."""
    return "".join(text)


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character of chars in place with func(index, character).

    Returns the same sequence.
    """
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)
    return chars


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full concatenation
    would have had. When size is 0 that length is len(src); when size
    does not exceed len(dest) it is size + len(src) and dest is left as is.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the resulting string and len(src). When size is 0 nothing is
    copied and dest is returned unchanged.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of func(index, character) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text yields the empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]