"""Byte-buffer helpers: fill, copy, move, search, compare and allocate.

Destinations must be writable buffers such as ``bytearray`` or a writable
``memoryview``. Sources may be any bytes-like object. Counts may not run
past the end of a buffer; doing so raises ``ValueError``.
"""

from __future__ import annotations

import struct
from contextlib import contextmanager
from typing import Iterator, Optional

SIZE_MAX = (1 << (struct.calcsize("P") * 8)) - 1
"""Largest value of the platform's unsigned size type."""


@contextmanager
def _view(obj: object, *, writable: bool) -> Iterator[memoryview]:
    with memoryview(obj) as raw, raw.cast("B") as view:  # type: ignore[arg-type]
        if writable and view.readonly:
            raise TypeError(f"{type(obj).__name__} is not a writable buffer")
        yield view


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_span(name: str, start: int, n: int, length: int) -> None:
    if start + n > length:
        raise ValueError(
            f"{name}: {n} bytes from offset {start} run past a buffer of {length} bytes"
        )


def mem_set(dest, c: int, count: int):
    """Fill the first ``count`` bytes of ``dest`` with ``c & 0xFF``; return ``dest``."""
    _check_int("count", count)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"fill value must be an int, got {type(c).__name__}")
    with _view(dest, writable=True) as view:
        _check_span("dest", 0, count, len(view))
        view[:count] = bytes((c & 0xFF,)) * count
    return dest


def bzero(dest, n: int) -> None:
    """Set the first ``n`` bytes of ``dest`` to zero."""
    mem_set(dest, 0, n)


def mem_copy(dest, src, n: int):
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_int("n", n)
    with _view(dest, writable=True) as dview, _view(src, writable=False) as sview:
        _check_span("dest", 0, n, len(dview))
        _check_span("src", 0, n, len(sview))
        dview[:n] = bytes(sview[:n])
    return dest


def mem_move(buffer, dest: int, src: int, n: int):
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns ``buffer``.
    """
    _check_int("dest", dest)
    _check_int("src", src)
    _check_int("n", n)
    with _view(buffer, writable=True) as view:
        _check_span("dest", dest, n, len(view))
        _check_span("src", src, n, len(view))
        if n:
            view[dest : dest + n] = bytes(view[src : src + n])
    return buffer


def mem_chr(data, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` among the first ``n``, or None."""
    _check_int("n", n)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"search value must be an int, got {type(c).__name__}")
    with _view(data, writable=False) as view:
        _check_span("data", 0, n, len(view))
        index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_cmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, taken as
    unsigned values, or 0 when the prefixes are equal.
    """
    _check_int("n", n)
    with _view(a, writable=False) as aview, _view(b, writable=False) as bview:
        _check_span("a", 0, n, len(aview))
        _check_span("b", 0, n, len(bview))
        for x, y in zip(aview[:n], bview[:n]):
            if x != y:
                return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled ``bytearray`` of ``nmemb * size`` bytes.

    Raises ``MemoryError`` when the product would overflow the platform's
    size type.
    """
    _check_int("nmemb", nmemb)
    _check_int("size", size)
    if not nmemb or not size:
        return bytearray()
    if nmemb >= SIZE_MAX // size:
        raise MemoryError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(nmemb * size)