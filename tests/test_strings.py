import pytest

from libft.strings import (
    atoi,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_empty():
    assert strlen("") == 0


@pytest.mark.parametrize("a,b", [("abc", "de"), ("", "xyz"), ("hello", "")])
def test_strlen_is_additive(a, b):
    assert strlen(a + b) == strlen(a) + strlen(b)


def test_strlcpy_truncates_to_size_minus_one():
    src = "hello world"
    copied, length = strlcpy(src, 4)
    assert len(copied) == 4 - 1
    assert src.startswith(copied)
    assert length == len(src)


def test_strlcpy_size_zero_copies_nothing():
    copied, length = strlcpy("hello", 0)
    assert copied == ""
    assert length == len("hello")


def test_strlcpy_large_buffer_copies_everything():
    copied, length = strlcpy("hello", 100)
    assert copied == "hello"
    assert length == len(copied)


def test_strlcpy_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    result, total = strlcat("ab", "cdef", 10)
    assert result == "ab" + "cdef"
    assert total == len("ab") + len("cdef")


def test_strlcat_truncates():
    size = 4
    result, total = strlcat("ab", "cdef", size)
    assert len(result) == size - 1
    assert result.startswith("ab")
    assert "cdef".startswith(result[len("ab"):])
    assert total == len("ab") + len("cdef")


def test_strlcat_full_destination_unchanged():
    size = 3
    result, total = strlcat("abcdef", "xy", size)
    assert result == "abcdef"
    assert total == size + len("xy")


def test_strlcat_size_zero():
    result, total = strlcat("", "xyz", 0)
    assert result == ""
    assert total == len("xyz")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("banana", "a"), ("abc", "c")])
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_terminator_gives_length():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_int_truncated_to_byte():
    assert strchr("abc", ord("b") + 256) == strchr("abc", "b")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("banana", "a"), ("abc", "a")])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_limited_by_n():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_difference_and_sign():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_prefix_compares_with_terminator():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    haystack, needle = "foobarbaz", "bar"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_needle_cut_by_length():
    assert strnstr("foobar", "bar", 5) is None
    assert strnstr("foobar", "bar", 6) is not None
    assert strnstr("foobar", "bar", 6) + len("bar") == len("foobar")


def test_strnstr_missing():
    assert strnstr("foobar", "qux", 6) is None


def test_atoi_whitespace_sign_and_trailing():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+7") == 7


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("   ") == 0
    assert atoi("") == 0


def test_atoi_wraps_to_int():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 12345, -98765, 2147483647, -2147483648])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_strdup_copies():
    assert strdup("abc") == "abc"
    assert strdup("") == ""