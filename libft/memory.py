"""Byte buffer operations on bytearrays and bytes-like objects."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (truncated to a byte)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(
    dest: bytearray | None, src: bytes | bytearray | memoryview | None, n: int
) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``.

    When both buffers are None nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise ValueError("both dest and src must be given")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    if dest != src:
        buffer[dest:dest + n] = buffer[src:src + n]
    return buffer


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``nmemb * size`` bytes.

    A zero count or size yields a one-byte buffer. A total that does not fit
    in an unsigned 64-bit size raises MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    total = nmemb * size
    if total > _SIZE_MAX:
        raise MemoryError(f"allocation of {nmemb} * {size} bytes overflows")
    return bytearray(total)