"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
_INT_MAX = 2**31 - 1


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0 or buffer_size > _INT_MAX - 1:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._archive = b""

    def read_line(self) -> bytes | None:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._archive:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._archive = b""
                raise
            if not chunk:
                break
            self._archive += chunk
        if not self._archive:
            return None
        end = self._archive.find(b"\n")
        if end < 0:
            line, self._archive = self._archive, b""
        else:
            line, self._archive = self._archive[: end + 1], self._archive[end + 1 :]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line