"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd`` and return the number written."""
    view = memoryview(data)
    written = 0
    while written < len(view):
        written += os.write(fd, view[written:])
    return written


def _char_bytes(c: int | str) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return bytes([c & 0xFF])


def putchar_fd(c: int | str, fd: int) -> int:
    """Write one character to ``fd``; return the number of bytes written.

    An integer is truncated to a single byte.
    """
    return _write_all(fd, _char_bytes(c))


def putstr_fd(s: str | None, fd: int) -> int:
    """Write ``s`` to ``fd``, or ``(null)`` when ``s`` is None; return bytes written."""
    if s is None:
        return _write_all(fd, b"(null)")
    return _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; do nothing when ``s`` is None."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode("ascii"))