"""Byte-buffer operations on bytearrays and other buffers."""

from __future__ import annotations

from typing import Optional


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dst."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dst; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dst, src) + n > len(buf):
        raise ValueError("range exceeds buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value in data[:n], or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Optional[bytes], b: Optional[bytes], n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair.

    A missing buffer compares below a present one, and two missing buffers
    are equal.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0