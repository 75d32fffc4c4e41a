"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def write_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to stream (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def write_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s to stream; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def write_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    target = _target(stream)
    target.write(s)
    target.write("\n")


def write_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of an integer."""
    _target(stream).write(format(operator.index(n), "d"))