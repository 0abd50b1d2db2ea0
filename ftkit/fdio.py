"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: int | str) -> bytes:
    if isinstance(c, bool):
        raise TypeError("expected a character or a byte value, got bool")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    raise TypeError(f"expected a character or a byte value, got {type(c).__name__}")


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to fd; an int is written as a single byte.

    Nothing is written when fd is negative.
    """
    data = _char_bytes(c)
    if fd >= 0:
        _write_all(fd, data)


def putstr_fd(text: str | None, fd: int) -> None:
    """Write text to fd, encoded as UTF-8.

    Nothing is written when text is None or fd is negative.
    """
    if text is None or fd < 0:
        return
    _write_all(fd, text.encode("utf-8"))


def putendl_fd(text: str | None, fd: int) -> None:
    """Write text followed by a newline to fd.

    Nothing is written when text is None or fd is negative.
    """
    if text is None or fd < 0:
        return
    _write_all(fd, text.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of n to fd.

    Nothing is written when fd is negative.
    """
    if fd < 0:
        return
    digits = []
    magnitude = -n if n < 0 else n
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    _write_all(fd, "".join(reversed(digits)).encode("ascii"))