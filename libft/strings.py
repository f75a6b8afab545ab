"""C-style string queries: length, bounded copy and concatenation, search, compare."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_C_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")
_INT_BITS = 32


def _char(c: CharLike) -> str:
    """Return c as a one-character string; an int is truncated to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied (possibly truncated) text and the length of src, so a
    caller detects truncation when the length is not smaller than size.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst in a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had. When dst already fills the buffer, it is returned unchanged and
    the reported length is size plus the length of src.
    """
    _check_size(size)
    used = min(len(dst), size)
    if used == size:
        return dst, size + len(src)
    room = size - used - 1
    return dst + src[:room], used + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Searching for the terminator '\\0' yields the length of s.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Searching for the terminator '\\0' yields the length of s.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when they agree.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle within the first length characters of haystack.

    An empty needle is found at index 0; a needle not found is None.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading C whitespace is skipped, one optional sign is accepted, parsing
    stops at the first non-digit, and the result wraps to a 32-bit int.
    """
    match = _NUMBER.match(s.lstrip(_C_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)