"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.transform import itoa

CharLike = Union[int, str]

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to fd; an int is written as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode(_ENCODING)
    elif isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode(_ENCODING))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write s followed by a newline to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode(_ENCODING))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit int to fd."""
    _write_all(fd, itoa(n).encode("ascii"))