"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import Any

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32 = 2**32
_UINT64_MASK = 2**64 - 1


def format_int(n: int) -> str:
    """Decimal form of ``n`` taken as a signed 32-bit integer."""
    wrapped = (n + 2**31) % _UINT32 - 2**31
    return str(wrapped)


def format_base(n: int, digits: str) -> str:
    """Write the non-negative ``n`` using ``digits`` as the symbols of the base."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError(f"cannot format a negative number, got {n}")
    base = len(digits)
    out = []
    while True:
        n, rest = divmod(n, base)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """``0x`` and the lower-case hex address, or ``(nil)`` for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format_base(address & _UINT64_MASK, HEX_LOWER)


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _format_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _format_str(value: str | None) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _format_char(_next_arg(values))
    if spec == "s":
        return _format_str(_next_arg(values))
    if spec == "p":
        return format_pointer(_next_arg(values))
    if spec in ("d", "i"):
        return format_int(_next_arg(values))
    if spec == "u":
        return format_base(_next_arg(values) % _UINT32, DECIMAL)
    if spec == "x":
        return format_base(_next_arg(values) % _UINT32, HEX_LOWER)
    if spec == "X":
        return format_base(_next_arg(values) % _UINT32, HEX_UPPER)
    # Unknown conversions produce nothing and take no argument.
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the result.

    An empty format, or one ending in a lone ``%``, raises ValueError.
    """
    if not fmt:
        raise ValueError("empty format string")
    values = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with '%'")
        out.append(_convert(spec, values))
    return "".join(out)


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``fd``; return the number of bytes written."""
    data = memoryview(format_string(fmt, *args).encode("utf-8"))
    written = 0
    while written < len(data):
        written += os.write(fd, data[written:])
    return written


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return bytes written."""
    sys.stdout.flush()
    return dprintf(1, fmt, *args)