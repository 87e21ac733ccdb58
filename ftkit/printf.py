"""A small printf: %c %s %d %i %u %x %X %p and %%.

Integers are taken at the width of the platform's ``int`` (``%d``, ``%i``)
or ``unsigned int`` (``%u``, ``%x``, ``%X``), wrapping as a C cast would.
A format string ends at its first ``"\\0"``. An unknown conversion prints
nothing and takes no argument; a lone ``%`` at the end is printed as is.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

from ftkit.strings import strdup
from ftkit.transform import INT_BITS, LONG_BITS

_UINT_MASK = (1 << INT_BITS) - 1
_ULONG_MASK = (1 << LONG_BITS) - 1
_FORMAT_PIECE = re.compile(r"%(.)|[^%]+|%", re.DOTALL)


def _int_arg(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    value &= _UINT_MASK
    if value >> (INT_BITS - 1):
        value -= 1 << INT_BITS
    return value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") & 0xFF)


def _as_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
    return strdup(value)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _ULONG_MASK
    else:
        address = id(value) & _ULONG_MASK
    if not address:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_str,
    "d": lambda v: str(_signed(_int_arg(v, "d"))),
    "i": lambda v: str(_signed(_int_arg(v, "i"))),
    "u": lambda v: str(_int_arg(v, "u") & _UINT_MASK),
    "x": lambda v: format(_int_arg(v, "x") & _UINT_MASK, "x"),
    "X": lambda v: format(_int_arg(v, "X") & _UINT_MASK, "X"),
    "p": _as_pointer,
}


def _render(match: re.Match[str], args: Iterator[Any]) -> str:
    conversion = match.group(1)
    if conversion is None:
        return match.group(0)
    if conversion == "%":
        return "%"
    convert = _CONVERSIONS.get(conversion)
    if convert is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    return convert(value)


def format_text(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    return "".join(
        _render(m, remaining) for m in _FORMAT_PIECE.finditer(strdup(fmt))
    )


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)