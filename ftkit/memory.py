"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    """Reject negative counts and counts that run past any of the buffers."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to value (truncated to a byte).

    Returns the same buffer.
    """
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buffer to zero and return it."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding count elements of size bytes.

    Raises OverflowError when the total size does not fit an unsigned
    64-bit length.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the maximum size")
    return bytearray(total)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within the first n bytes.

    c is truncated to a byte. Returns None when no such byte is found.
    """
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(
    s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first n bytes of s1 and s2.

    Returns 0 when they are equal, otherwise the difference between the
    first pair of bytes that differ, as unsigned values.
    """
    _check_count(n, s1, s2)
    for left, right in zip(bytes(s1[:n]), bytes(s2[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(
    dest: bytearray, src: bytes | bytearray | memoryview, n: int
) -> bytearray:
    """Copy the first n bytes of src into the start of dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns the buffer.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if src + n > len(buffer) or dest + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer