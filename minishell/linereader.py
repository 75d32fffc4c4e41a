"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

import os
from typing import AnyStr, BinaryIO, Callable, Iterator, Optional, TextIO, Union

BUFFER_SIZE = 5

Source = Union[int, TextIO, BinaryIO]


def _newline(data: AnyStr) -> AnyStr:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader:
    """Read lines from a file descriptor or a file-like object.

    Data is pulled buffer_size units at a time; whatever follows a returned
    line is kept for the next call. Lines keep their newline, and the last
    line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        read: Callable[[int], Optional[AnyStr]]
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor: {source}")
            fd = source
            read = lambda n: os.read(fd, n)  # noqa: E731
        else:
            read = source.read
        self._read = read
        self._size = buffer_size
        self._stash = None

    def read_line(self):
        """Return the next line, or None once the input is exhausted."""
        stash = self._stash
        while not (stash and _newline(stash) in stash):
            chunk = self._read(self._size)
            if not chunk:
                break
            stash = chunk if stash is None else stash + chunk
        if not stash:
            self._stash = stash
            return None
        index = stash.find(_newline(stash))
        cut = len(stash) if index < 0 else index + 1
        line, self._stash = stash[:cut], stash[cut:]
        return line

    def __iter__(self) -> Iterator:
        return iter(self.read_line, None)