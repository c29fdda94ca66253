"""String search, comparison, copying and splitting helpers."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import zip_longest
from typing import Callable


def _char(c: int | str) -> str:
    """Return c as a one-character string; ints are taken modulo 256, like a C char."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _check_size(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character gives the position of the terminator, len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character gives the position of the terminator, len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch.

    The end of a string compares as a NUL character.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of needle in the first length characters of haystack, or None.

    An empty needle matches at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy src into a buffer of dstsize characters, terminator included.

    Returns the copied text and the full length of src, so truncation shows
    as a returned length of dstsize or more.
    """
    _check_size(dstsize, "dstsize")
    if dstsize == 0:
        return "", len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append src to dst within a buffer of dstsize characters, terminator included.

    Returns the resulting text and the length the full result would have had;
    if dst already fills the buffer it is left unchanged and dstsize + len(src)
    is returned.
    """
    _check_size(dstsize, "dstsize")
    if len(dst) >= dstsize:
        return dst, dstsize + len(src)
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strjoin_all(*args: str) -> str | None:
    """Concatenate every argument; None when the result would be empty."""
    joined = "".join(args)
    return joined or None


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty if start is past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters of charset from both ends of s."""
    return s.strip(charset)


def split(s: str, c: int | str) -> list[str]:
    """Split s on the separator character c, dropping empty words."""
    sep = _char(c)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call func(index, s) for every position of a mutable character sequence.

    func may rewrite s[index] in place.
    """
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index in range(len(s)):
        func(index, s)