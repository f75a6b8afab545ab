"""Functions that build new strings from existing ones."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _separator(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end of s gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, c: CharLike) -> List[str]:
    """Split s on the separator c, dropping empty words."""
    sep = _separator(c)
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit int."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of f(index, char) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call f(index, char) for each element of chars, in order.

    When f returns a value, that value replaces the element in place; when it
    returns None the element is left as it was.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement