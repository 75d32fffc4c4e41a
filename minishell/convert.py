"""Conversions between decimal text and integers."""

from __future__ import annotations

import operator
from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and a single optional sign is read;
    parsing stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_is_ascii_digit, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return format(operator.index(n), "d")