"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes (or None when nothing is found), and
routines that would fill a caller's buffer return the new text together
with the length the C routine reports.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: str | int) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    ch = _char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle within the first length characters of haystack.

    An empty needle is found at index 0; a missing one gives None.
    """
    if length < 0:
        raise ValueError(f"negative length: {length}")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters (terminator included).

    Return the resulting buffer text and the length of src. With a size
    of 0 the buffer is left as dst.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters (terminator included).

    Return the resulting buffer text and the length the full result would
    have had; when dst already fills the buffer that length is size + len(src).
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of s from start.

    A start at or past the end gives an empty string; a missing s gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in charset from both ends of s."""
    if s is None:
        return None
    if charset is None:
        return strdup(s)
    return s.strip(charset)


def split(s: Optional[str], sep: str | int) -> Optional[list[str]]:
    """Split s on the separator character, dropping empty pieces."""
    if s is None:
        return None
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from func(index, char) for every character of s."""
    if s is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(chars: Optional[MutableSequence[str]], func: Callable[[int, str], str]) -> None:
    """Replace every element of chars in place with func(index, char)."""
    if chars is None:
        return
    for i, ch in enumerate(chars):
        chars[i] = func(i, ch)