import pytest

from libft.strings import (
    strchr,
    strcpy,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# strlen

@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\there"])
def test_strlen_whole_string(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == 3
    assert strlen(bytearray(b"xy\0\0\0")) == 2


def test_strlen_buffer_without_nul():
    assert strlen(b"abcd") == 4


# strlcpy

def test_strlcpy_full_copy():
    dst = bytearray(10)
    result = strlcpy(dst, "hello", len(dst))
    assert result == len("hello")
    assert dst[:6] == b"hello\0"


def test_strlcpy_truncates_and_terminates():
    dst = bytearray(b"XXXXXXXX")
    result = strlcpy(dst, b"abcdefgh", 4)
    assert result == 8
    assert strlen(dst) == 3
    assert bytes(dst[:3]) == b"abc"
    assert dst[4:] == b"XXXX"


def test_strlcpy_size_zero_leaves_buffer():
    dst = bytearray(b"keep")
    assert strlcpy(dst, "other", 0) == 5
    assert dst == bytearray(b"keep")


def test_strlcpy_size_too_large():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), "abc", 5)


# strcpy

def test_strcpy_copies_and_returns_dst():
    dst = bytearray(8)
    result = strcpy(dst, "abc")
    assert result is dst
    assert dst[:4] == b"abc\0"


def test_strcpy_too_small():
    with pytest.raises(ValueError):
        strcpy(bytearray(3), "abc")


# strlcat

def test_strlcat_appends():
    dst = bytearray(12)
    strcpy(dst, "foo")
    result = strlcat(dst, "bar", len(dst))
    assert result == 6
    assert bytes(dst[: strlen(dst)]) == b"foobar"


def test_strlcat_truncates():
    dst = bytearray(6)
    strcpy(dst, "ab")
    result = strlcat(dst, "cdefgh", 5)
    assert result == 8
    assert strlen(dst) == 4
    assert bytes(dst[:2]) == b"ab"


def test_strlcat_size_not_above_existing():
    dst = bytearray(8)
    strcpy(dst, "abcd")
    before = bytes(dst)
    assert strlcat(dst, "xyz", 2) == 2 + 3
    assert bytes(dst) == before


def test_strlcat_none_with_size_zero():
    assert strlcat(None, "abc", 0) == 0


def test_strlcat_none_with_size():
    with pytest.raises(ValueError):
        strlcat(None, "abc", 3)


# strchr / strrchr

def test_strchr_first_occurrence():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_missing():
    assert strchr("banana", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("banana", 0) == len("banana")
    assert strchr("banana", "\0") == len("banana")


def test_strchr_int_truncated_to_byte():
    assert strchr("xyz", ord("y") + 256) == strchr("xyz", "y")


def test_strchr_bytes():
    assert strchr(b"hello", ord("l")) == b"hello".index(b"l")


def test_strrchr_last_occurrence():
    text = "banana"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("banana", "q") is None
    assert strrchr("banana", 0) == len("banana")


def test_strrchr_first_char_only():
    assert strrchr("abc", "a") == 0


# strncmp

def test_strncmp_equal():
    assert strncmp("hello", "hello", 10) == 0


def test_strncmp_zero_n():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_prefix_within_n():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

def test_strnstr_found():
    big = "lorem ipsum dolor"
    index = strnstr(big, "ipsum", len(big))
    assert big[index:index + len("ipsum")] == "ipsum"


def test_strnstr_must_fit_in_length():
    big = "lorem ipsum dolor"
    assert strnstr(big, "ipsum", 8) is None
    assert strnstr(big, "ipsum", 11) == big.index("ipsum")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_none_big():
    assert strnstr(None, "x", 0) is None


def test_strnstr_bytes():
    assert strnstr(b"aaab", b"ab", 4) == 2


# strdup

def test_strdup_copy():
    original = bytearray(b"abc")
    copy = strdup(original)
    assert copy == original
    copy[0] = ord("z")
    assert original == bytearray(b"abc")


def test_strdup_stops_at_nul():
    assert strdup("ab\0cd") == "ab"


# substr

def test_substr_within_range():
    text = "hello world"
    assert substr(text, 6, 5) == text[6:]


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 5, 3) == ""


def test_substr_zero_length():
    assert substr("hello", 1, 0) == ""


def test_substr_length_clipped():
    text = "hello"
    assert substr(text, 2, 100) == text[2:]


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


# strjoin

@pytest.mark.parametrize("a, b", [("", ""), ("foo", ""), ("", "bar"), ("foo", "bar")])
def test_strjoin_parts(a, b):
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a)
    assert joined.endswith(b)


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"


def test_strtrim_keeps_inner_chars():
    result = strtrim("--a-b--", "-")
    assert result[0] != "-" and result[-1] != "-"
    assert "-" in result


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert strtrim("  a  ", "") == "  a  "


# strmapi

def test_strmapi_uses_index_and_char():
    result = strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbC"


def test_strmapi_identity():
    assert strmapi("keep me", lambda i, ch: ch) == "keep me"


# striteri

def test_striteri_replaces_items():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i >= 2 else None)
    assert chars == ["a", "b", "C", "D"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")