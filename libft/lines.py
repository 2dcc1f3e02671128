"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line is returned with its trailing newline; a last line without one
    is returned as it is.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line, or None when nothing is left to read."""
        while True:
            end = self._pending.find(b"\n")
            if end >= 0:
                line = bytes(self._pending[: end + 1])
                del self._pending[: end + 1]
                return line
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                if not self._pending:
                    return None
                line = bytes(self._pending)
                self._pending.clear()
                return line
            self._pending += chunk

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from ``fd``, or None at its end.

    Unread data is kept between calls for each descriptor.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line