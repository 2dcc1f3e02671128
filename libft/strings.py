"""String routines with C-string semantics.

Functions that read strings accept ``str`` or bytes-like values and treat a
NUL character as the end of the string, so Python strings without NUL
behave as whole strings. Functions that fill a destination buffer
(``strcpy``, ``strlcpy``, ``strlcat``) work on a ``bytearray`` whose length
is its capacity, and they always leave it NUL-terminated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableSequence
from typing import Any, TypeVar

Text = TypeVar("Text", str, bytes, bytearray)
Source = str | bytes | bytearray | memoryview


def _terminator(s: Source) -> int:
    """Index of the first NUL in ``s``, or its length when there is none."""
    if isinstance(s, str):
        index = s.find("\0")
    else:
        index = bytes(s).find(0)
    return len(s) if index < 0 else index


def _codes(s: Source) -> Iterator[int]:
    """Yield the character codes of ``s`` up to its terminator."""
    end = _terminator(s)
    if isinstance(s, str):
        yield from (ord(ch) for ch in s[:end])
    else:
        yield from bytes(s[:end])


def _char_code(c: int | str) -> int:
    """Return a character code, truncating integers to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _as_bytes(src: Source) -> bytes:
    """Return ``src`` as bytes, cut at its terminator."""
    data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlen(s: Source) -> int:
    """Number of characters before the first NUL (the whole length if none)."""
    return _terminator(s)


def strlcpy(dst: bytearray, src: Source, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst``, NUL-terminated.

    Returns the length of ``src``; a result of ``size`` or more means the copy
    was truncated. With ``size`` 0 the buffer is left untouched.
    """
    data = _as_bytes(src)
    if size == 0:
        return len(data)
    _check_size(dst, size)
    count = min(size - 1, len(data))
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strcpy(dst: bytearray, src: Source) -> bytearray:
    """Copy ``src`` and its terminating NUL into ``dst`` and return ``dst``."""
    data = _as_bytes(src)
    if len(data) + 1 > len(dst):
        raise ValueError(
            f"buffer of {len(dst)} bytes cannot hold {len(data)} bytes and a terminator"
        )
    dst[: len(data)] = data
    dst[len(data)] = 0
    return dst


def strlcat(dst: bytearray | None, src: Source, size: int) -> int:
    """Append ``src`` to the string in ``dst`` so the total fits in ``size`` bytes.

    Returns the length the full concatenation would have. When ``size`` is not
    larger than the current string in ``dst``, nothing is written and
    ``size + len(src)`` is returned.
    """
    if dst is None and size == 0:
        return 0
    if dst is None:
        raise ValueError("a destination buffer is required when size is not 0")
    data = _as_bytes(src)
    _check_size(dst, size)
    dest_len = strlen(dst)
    if size <= dest_len:
        return size + len(data)
    count = min(len(data), size - 1 - dest_len)
    dst[dest_len:dest_len + count] = data[:count]
    dst[dest_len + count] = 0
    return dest_len + len(data)


def strchr(s: Source, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return strlen(s)
    return next((i for i, item in enumerate(_codes(s)) if item == code), None)


def strrchr(s: Source, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return strlen(s)
    found = None
    for i, item in enumerate(_codes(s)):
        if item == code:
            found = i
    return found


def strncmp(s1: Source, s2: Source, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    first = list(_codes(s1))
    second = list(_codes(s2))
    for i in range(n):
        a = first[i] if i < len(first) else 0
        b = second[i] if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: Text | None, little: Text, length: int) -> int | None:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns None when there is no match.
    """
    if big is None and length == 0:
        return None
    if big is None:
        raise ValueError("a string to search is required when length is not 0")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = little[: strlen(little)]
    if not needle:
        return 0
    haystack = big[: min(length, strlen(big))]
    index = haystack.find(needle)
    return None if index < 0 else index


def strdup(s: Text) -> Text:
    """Return a copy of ``s`` up to its terminator."""
    return s[: strlen(s)]


def substr(s: Text, start: int, length: int) -> Text:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    end = strlen(s)
    if length == 0 or start >= end:
        return s[:0]
    return s[start:min(start + length, end)]


def strjoin(s1: Text, s2: Text) -> Text:
    """Return ``s1`` followed by ``s2``."""
    return s1[: strlen(s1)] + s2[: strlen(s2)]


def strtrim(s: Text, charset: Text) -> Text:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s[: strlen(s)].strip(charset[: strlen(charset)])


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s[: strlen(s)]))


def striteri(chars: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on every item of ``chars``, in place.

    A value returned by ``f`` replaces the item; None leaves it as it was.
    """
    for i, item in enumerate(list(chars)):
        replacement = f(i, item)
        if replacement is not None:
            chars[i] = replacement