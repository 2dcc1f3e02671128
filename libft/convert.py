"""Conversions between text and integers, and splitting on a separator."""

from __future__ import annotations

from typing import TypeVar

Text = TypeVar("Text", str, bytes)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(range(9, 14)) | {32}


def _wrap_int32(n: int) -> int:
    return (n - _INT_MIN) % 2**32 + _INT_MIN


def _codes(text: str | bytes) -> list[int]:
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def atoi(text: str | bytes) -> int:
    """Parse a leading decimal integer as a signed 32-bit value.

    Leading whitespace (tab to carriage return, and space) is skipped, then one
    optional sign is read, then digits up to the first non-digit. Text without
    digits gives 0. Values outside the 32-bit range wrap around.
    """
    codes = _codes(text)
    pos = 0
    while pos < len(codes) and codes[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(codes) and codes[pos] in (ord("+"), ord("-")):
        if codes[pos] == ord("-"):
            sign = -1
        pos += 1
    value = 0
    while pos < len(codes) and ord("0") <= codes[pos] <= ord("9"):
        value = value * 10 + codes[pos] - ord("0")
        pos += 1
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal form of the signed 32-bit integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def split(s: Text, sep: str | bytes | int) -> list[Text]:
    """Split ``s`` on the single character ``sep``, dropping empty words.

    The string ends at its first NUL character.
    """
    if isinstance(s, str):
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        separator: str | bytes = sep
        end = s.find("\0")
    else:
        if isinstance(sep, int) and not isinstance(sep, bool):
            separator = bytes([sep & 0xFF])
        elif isinstance(sep, (bytes, bytearray)) and len(sep) == 1:
            separator = bytes(sep)
        else:
            raise ValueError(f"separator must be a single byte, got {sep!r}")
        end = s.find(0)
    if end >= 0:
        s = s[:end]
    return [word for word in s.split(separator) if word]