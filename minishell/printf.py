"""A small printf with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF


def format_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer."""
    value = operator.index(n)
    if value < 0:
        raise ValueError(f"cannot format a negative number in hexadecimal: {value}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
        if value == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return an address as 0x-prefixed lower-case hex, or "(nil)" for a null one."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None

    if spec == "c":
        return _format_char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(take())
    if spec in ("d", "i"):
        return format(operator.index(take()), "d")
    if spec == "u":
        return format(operator.index(take()) & _UINT_MASK, "d")
    if spec in ("x", "X"):
        return format_hex(operator.index(take()) & _UINT_MASK, spec == "X")
    if spec == "%":
        return "%"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    An unknown conversion produces nothing, and a lone "%" at the end of
    fmt is kept as is. Missing arguments raise TypeError.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded fmt to stream (standard output by default).

    Return the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)