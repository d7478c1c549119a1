"""Byte-buffer operations on mutable bytes-like objects."""

from __future__ import annotations

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]

Buffer = bytearray | memoryview
_SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` truncated to a byte."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> Buffer:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the product does not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size range")
    return bytearray(total)


def memcpy(dest: Buffer, src, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (as a byte) in the first ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, else 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0