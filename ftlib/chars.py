"""ASCII character classification and case conversion."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_digit(c: int | str) -> bool:
    """True for '0' through '9'."""
    return 0x30 <= _code(c) <= 0x39


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through '~'."""
    return 0x20 <= _code(c) <= 0x7E


def is_space(c: int | str) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in (0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20)


def _case_shift(c: int | str, low: int, high: int, delta: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _case_shift(c, 0x41, 0x5A, 0x20)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _case_shift(c, 0x61, 0x7A, -0x20)


def is_integer(s: str) -> bool:
    """True if s is an optional '-' followed by digits whose value fits a 32-bit int.

    An empty digit part counts as zero and is accepted.
    """
    negative = s.startswith("-")
    digits = s[1:] if negative else s
    if not all(is_digit(ch) for ch in digits):
        return False
    value = int(digits) if digits else 0
    if negative:
        return value <= -INT_MIN
    return value <= INT_MAX