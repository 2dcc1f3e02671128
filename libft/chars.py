"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
Only the ASCII ranges are taken into account; other values pass through
unchanged or classify as false.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form as ``original``."""
    if isinstance(original, str):
        return chr(code)
    return code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c