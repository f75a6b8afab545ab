"""Byte-buffer operations over bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy n bytes from src to the start of dst and return dst.

    Returns None when both dst and src are None.
    """
    if dst is None and src is None:
        return None
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy n bytes from src to dst, correct even when the two overlap.

    Returns None when both dst and src are None.
    """
    if dst is None and src is None:
        return None
    _check_count(n, dst, src)
    # Taking a snapshot of the source makes overlapping views safe.
    snapshot = bytes(src[:n])
    dst[:n] = snapshot
    return dst


def memchr(s, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of c
    within the first n bytes of s, or None."""
    _check_count(n, s)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first n bytes of s1 and s2.

    Returns the difference of the first differing bytes, or 0.
    """
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)