"""A small printf supporting the c, %, s, p, d, i, u, x and X conversions."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from ftlib.chars import INT_MAX, INT_MIN
from ftlib.output import putstr_fd

STDOUT = 1
SPECIFIERS = "c%spdiuxX"

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_U32 = 2**32
_U64 = 2**64


def _digits(upper: bool) -> str:
    return _UPPER_DIGITS if upper else _LOWER_DIGITS


def to_hex(nb: int, upper: bool = False) -> str:
    """Return nb in hexadecimal with no leading zeros, wrapped to 64 bits."""
    value = nb % _U64
    digits = _digits(upper)
    out: list[str] = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def to_hex_fixed(nb: int, upper: bool = False) -> str:
    """Return nb in hexadecimal as exactly 16 digits, wrapped to 64 bits."""
    value = nb % _U64
    digits = _digits(upper)
    out = []
    for _ in range(16):
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _as_uint32(value: Any, spec: str) -> int:
    number = _require_int(value, spec)
    if not INT_MIN <= number < _U32:
        raise OverflowError(f"{number} does not fit a 32-bit integer")
    return number % _U32


def _spec_char(args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _spec_percent(args: Iterator[Any]) -> str:
    return "%"


def _spec_str(args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
    return value


def _spec_addr(args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value
    else:
        address = id(value)
    return "0x" + to_hex(address)


def _spec_int(args: Iterator[Any]) -> str:
    number = _require_int(_next_arg(args), "d")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit a 32-bit int")
    return str(number)


def _spec_uint(args: Iterator[Any]) -> str:
    return str(_as_uint32(_next_arg(args), "u"))


def _spec_lower_hex(args: Iterator[Any]) -> str:
    return to_hex(_as_uint32(_next_arg(args), "x"))


def _spec_upper_hex(args: Iterator[Any]) -> str:
    return to_hex(_as_uint32(_next_arg(args), "X"), upper=True)


_HANDLERS: dict[str, Callable[[Iterator[Any]], str]] = {
    "c": _spec_char,
    "%": _spec_percent,
    "s": _spec_str,
    "p": _spec_addr,
    "d": _spec_int,
    "i": _spec_int,
    "u": _spec_uint,
    "x": _spec_lower_hex,
    "X": _spec_upper_hex,
}


def _render(fmt: str, args: Iterable[Any]) -> str:
    remaining = iter(args)
    parts: list[str] = []
    pos = 0
    while True:
        index = fmt.find("%", pos)
        if index < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:index])
        if index + 1 >= len(fmt):
            raise ValueError("format string ends inside a conversion")
        spec = fmt[index + 1]
        handler = _HANDLERS.get(spec)
        if handler is None:
            raise ValueError(f"unsupported conversion %{spec}")
        parts.append(handler(remaining))
        pos = index + 2
    return "".join(parts)


def format_printf(fmt: str, *args: Any) -> str:
    """Return fmt with every conversion replaced by the next argument.

    Extra arguments are ignored; missing ones raise TypeError, and an unknown
    or unfinished conversion raises ValueError.
    """
    return _render(fmt, args)


def vprintf(fmt: str, args: Iterable[Any]) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    return putstr_fd(_render(fmt, args), STDOUT)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    return vprintf(fmt, args)