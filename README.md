# libft

A small utility library of character classification, byte-buffer, string,
output and singly linked list helpers. The routines follow the familiar C
library conventions (bounded copies, `strlcpy`-style return lengths, 32-bit
`atoi` wrap-around) but take and return Python values and raise exceptions
instead of returning error codes.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Modules

### `libft.charclass`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` take either an
integer character code or a one-character string and return a `bool`,
testing the ASCII ranges only. `to_upper` and `to_lower` convert ASCII
letters and pass everything else through; the result has the same type as
the argument. A string of any other length raises `ValueError`, anything
that is neither an `int` nor a `str` raises `TypeError`.

### `libft.memory`

Operations on `bytearray` (and, for reading, any bytes-like) buffers:

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c` and
  returns `buf`; `bzero(buf, n)` zeroes them.
- `memcpy(dst, src, n)` and `memmove(dst, src, n)` copy `n` bytes and return
  `dst` (or `None` when both are `None`); `memmove` is safe for overlapping
  views.
- `memchr(s, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(s1, s2, n)` returns the difference of the first differing bytes,
  or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`; an oversize
  product raises `OverflowError`.

A negative count, or one larger than a buffer, raises `ValueError`.

### `libft.strings`

- `strlen(s)`, `strdup(s)`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(resulting_text, would_be_length)`.
- `strchr(s, c)` / `strrchr(s, c)` return an index or `None`; searching for
  `"\0"` gives `len(s)`.
- `strncmp(s1, s2, n)` returns the difference of the first differing codes.
- `strnstr(haystack, needle, length)` returns an index or `None`; an empty
  needle is found at `0`.
- `atoi(s)` skips C whitespace, takes one optional sign, stops at the first
  non-digit and wraps the result to a 32-bit int.

### `libft.transform`

`substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`,
`split(s, c)` (empty words dropped), `itoa(n)` (32-bit range, otherwise
`OverflowError`), `strmapi(s, f)` and `striteri(chars, f)`, which calls
`f(index, char)` on a mutable sequence of characters and stores any
non-`None` result back in place.

### `libft.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write to an open file descriptor with `os.write`.
Strings are encoded as UTF-8; an integer passed to `putchar_fd` is written
as its low byte; `None` strings write nothing.

### `libft.linkedlist`

- `Node(content, next)` with `last()` returning the final node of its chain.
- `delone(node, delete)` releases one node's content with `delete`.
- `LinkedList(items)` supports `len()`, iteration over contents,
  `add_front(node)`, `add_back(node)`, `last()`, `clear(delete)`,
  `iterate(f)` and `map(f, delete)`, which builds a new list and, if `f`
  raises, releases what it had already produced before re-raising.

## Examples

```python
from libft.transform import split, itoa, strtrim
from libft.strings import atoi, strlcpy

split("  hello  world ", " ")   # ['hello', 'world']
itoa(-2147483648)               # '-2147483648'
strtrim("xxhixx", "x")          # 'hi'
atoi("   -42abc")               # -42
strlcpy("hello", 3)             # ('he', 5)
```

```python
from libft.memory import memset, memmove

buf = bytearray(b"abcdef")
memset(buf, ord("z"), 2)        # bytearray(b'zzcdef')
memmove(buf, buf[2:], 4)        # bytearray(b'cdefef')
```

```python
from libft.linkedlist import LinkedList, Node

items = LinkedList([1, 2, 3])
items.add_front(Node(0))
items.add_back(Node(4))
len(items)                      # 5
list(items.map(lambda x: x * 10, print))  # [0, 10, 20, 30, 40]
```

## What it does not do

This is a library only: it installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```