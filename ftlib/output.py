"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os

from ftlib.chars import INT_MAX, INT_MIN

UINT_MAX = 2**32 - 1


def _encode(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of data to fd, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: int | str, fd: int) -> int:
    """Write one character to fd and return the number of bytes written.

    An int is written as the single byte c modulo 256.
    """
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character")
    if isinstance(c, int):
        return _write_all(fd, bytes([c % 256]))
    if isinstance(c, str) and len(c) == 1:
        return _write_all(fd, _encode(c))
    raise ValueError(f"expected a single character, got {c!r}")


def putstr_fd(s: str | bytes, fd: int) -> int:
    """Write s to fd and return the number of bytes written."""
    return _write_all(fd, _encode(s))


def putendl_fd(s: str | bytes, fd: int) -> int:
    """Write s followed by a newline to fd and return the number of bytes written."""
    return putstr_fd(s, fd) + _write_all(fd, b"\n")


def nputstr_fd(s: str | bytes, fd: int, n: int) -> int:
    """Write at most the first n bytes of s to fd and return the number written."""
    if n < 0:
        raise ValueError("n must not be negative")
    data = _encode(s)
    return _write_all(fd, data[:n])


def putnbr_fd(n: int, fd: int) -> int:
    """Write a 32-bit signed integer in decimal to fd and return the bytes written."""
    if isinstance(n, bool) or not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n!r} does not fit a 32-bit int")
    return _write_all(fd, str(n).encode("ascii"))


def putnbr_uint_fd(n: int, fd: int) -> int:
    """Write a 32-bit unsigned integer in decimal to fd and return the bytes written.

    Nothing is written to a negative descriptor.
    """
    if isinstance(n, bool) or not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n!r} does not fit a 32-bit unsigned int")
    if fd < 0:
        return 0
    return _write_all(fd, str(n).encode("ascii"))