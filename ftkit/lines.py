"""Read a stream one line at a time through a fixed-size read buffer.

Lines keep their trailing newline; the last line may lack one. The stream
may yield ``str`` or ``bytes``; lines come back as the same type. As with
NUL-terminated buffers, anything after a ``"\\0"`` within one read is lost.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple, Union

BUFFER_SIZE = 10
"""Default number of characters or bytes asked for per read."""

Chunk = Union[str, bytes]


def _until_nul(value: Chunk) -> Chunk:
    end = value.find("\0" if isinstance(value, str) else b"\0")
    return value if end < 0 else value[:end]


def _split_line(value: Chunk) -> Tuple[Chunk, Chunk, bool]:
    """Split ``value`` after its first newline.

    Returns the head (newline included), the tail, and whether a newline
    was found; without one the head is all of ``value``.
    """
    newline = "\n" if isinstance(value, str) else b"\n"
    index = value.find(newline)
    if index < 0:
        return value, value[:0], False
    return value[: index + 1], value[index + 1 :], True


class LineReader:
    """Yields the lines of ``stream``, reading ``buffer_size`` units at a time."""

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if stream is None:
            raise TypeError("stream must not be None")
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._rest: Optional[Chunk] = None

    def read_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream has nothing more."""
        line: Optional[Chunk] = None
        complete = False
        if self._rest is not None:
            line, _, complete = _split_line(self._rest)
        while not complete:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if not isinstance(chunk, str):
                chunk = bytes(chunk)
            self._rest = _until_nul(chunk)
            head, _, complete = _split_line(self._rest)
            line = head if line is None else line + head
        if not line:
            return None
        if complete:
            _, self._rest, _ = _split_line(self._rest)
            return line
        self._rest = line[:0]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.read_line, None)