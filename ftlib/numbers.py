"""Conversions between integers and their textual representations."""

from __future__ import annotations

from itertools import dropwhile, takewhile

from ftlib.chars import INT_MAX, INT_MIN, is_digit, is_space

LONG_MAX = 2**63 - 1
_U64 = 2**64
_BASE_FORBIDDEN = frozenset("+- \t\n\v\f\r")


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value, as a C cast to int does."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _check_int32(n: int) -> None:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit int")


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("-", "+"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Values above the 64-bit signed range give -1 (positive) or 0 (negative);
    anything else is wrapped to a 32-bit int.
    """
    rest = "".join(dropwhile(is_space, s))
    sign, rest = _split_sign(rest)
    total = 0
    for ch in takewhile(is_digit, rest):
        total = (total * 10 + int(ch)) % _U64
    if sign > 0 and total > LONG_MAX:
        return -1
    if sign < 0 and total > LONG_MAX + 1:
        return 0
    return _to_int32(total * sign)


def _validate_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("base must have at least two symbols")
    if any(ch in _BASE_FORBIDDEN for ch in base):
        raise ValueError("base must not contain signs or whitespace")
    if len(set(base)) != len(base):
        raise ValueError("base must not contain duplicate symbols")


def atoi_base(s: str, base: str) -> int:
    """Parse s as a number written with the symbols of base.

    Leading whitespace is skipped and any number of '+'/'-' signs are applied.
    Parsing stops at the first character that is not in base.
    Raises ValueError for a base that is too short, has duplicates, signs or whitespace.
    """
    _validate_base(base)
    rest = "".join(dropwhile(lambda ch: ch in " \t\n\v\f\r", s))
    signs = "".join(takewhile(lambda ch: ch in "+-", rest))
    rest = rest[len(signs):]
    sign = -1 if signs.count("-") % 2 else 1
    radix = len(base)
    total = 0
    for ch in takewhile(lambda ch: ch in base, rest):
        total = total * radix + base.index(ch)
    return _to_int32(total * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    _check_int32(n)
    return str(n)


def convert_nbr_base(nb: int, base: str) -> str:
    """Return the text of a 32-bit integer written with the symbols of base."""
    _check_int32(nb)
    if len(base) < 2:
        raise ValueError("base must have at least two symbols")
    radix = len(base)
    magnitude = abs(nb)
    digits: list[str] = []
    while True:
        magnitude, rem = divmod(magnitude, radix)
        digits.append(base[rem])
        if magnitude == 0:
            break
    prefix = "-" if nb < 0 else ""
    return prefix + "".join(reversed(digits))


def nbrlen(num: int) -> int:
    """Number of characters needed to print num in decimal, sign included."""
    return len(str(abs(num))) + (1 if num < 0 else 0)


def nbrlen_uint(num: int) -> int:
    """Number of decimal digits of a non-negative integer."""
    if num < 0:
        raise ValueError("expected a non-negative integer")
    return len(str(num))