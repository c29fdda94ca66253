"""Byte-buffer helpers working on bytes-like objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray | None:
    """Return a zeroed buffer of nmemb * size bytes, or None when either is zero.

    Raises OverflowError when the product does not fit a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return None
    if nmemb > SIZE_MAX // size:
        raise OverflowError("nmemb * size overflows")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check_length(n, data)
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dst and return dst."""
    if dst is src:
        return dst
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf)
    if max(dest, src) + n > len(buf):
        raise IndexError("region extends past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf