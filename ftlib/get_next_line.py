"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 2048


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines are returned as bytes, newline included; the last line may lack one.
    NUL bytes in the input are skipped.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> bytes | None:
        """Return the next line, or None when nothing is left to read.

        A read error with part of a line collected returns that part;
        with nothing collected it propagates as OSError.
        """
        line = bytearray()
        while True:
            if not self._pending:
                try:
                    chunk = os.read(self.fd, self.buffer_size)
                except OSError:
                    if line:
                        return bytes(line)
                    raise
                if not chunk:
                    return bytes(line) if line else None
                self._pending = chunk.replace(b"\0", b"")
            index = self._pending.find(b"\n")
            if index >= 0:
                line += self._pending[: index + 1]
                self._pending = self._pending[index + 1:]
                return bytes(line)
            line += self._pending
            self._pending = b""

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of fd, keeping a separate buffer for every descriptor.

    The buffer of a descriptor is dropped once it reports end of input or an error.
    """
    if fd < 0:
        raise ValueError("file descriptor must not be negative")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line