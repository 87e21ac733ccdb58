"""Number parsing and formatting, and building new strings from old ones.

Strings end at their first ``"\\0"`` if they hold one, just as in
``ftkit.strings``. Parsed numbers wrap to the width of the platform's
``int`` and ``long`` types.
"""

from __future__ import annotations

import struct
from typing import Callable, MutableSequence, Optional, Union

from ftkit.strings import strdup

CharLike = Union[int, str]

INT_BITS = struct.calcsize("i") * 8
LONG_BITS = struct.calcsize("l") * 8
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(s: str) -> int:
    text = strdup(s)
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer, wrapping to the width of ``int``.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit; no digits at all gives 0.
    """
    return _wrap(_parse(s), INT_BITS)


def atol(s: str) -> int:
    """Parse a leading decimal integer, wrapping to the width of ``long``."""
    return _wrap(_parse(s), LONG_BITS)


def itoa(n: int) -> str:
    """Decimal text of an ``int``-sized integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a {INT_BITS}-bit int")
    return str(n)


def split(s: str, c: CharLike) -> list[str]:
    """Words of ``s`` separated by runs of the character ``c``; empty words are dropped."""
    text = strdup(s)
    sep = _char(c)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A ``start`` at or past the end gives the empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f(index, char)`` for every character of ``s``.

    Each result of ``f`` must be a single character; a ``"\\0"`` among them
    ends the new string.
    """
    text = strdup(s)
    return strdup("".join(_char(f(i, ch)) for i, ch in enumerate(text)))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each character of ``chars`` up to a ``"\\0"``.

    When ``f`` returns a character it replaces the one at that index in place;
    when it returns None the character is left as it is.
    """
    for i, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = _char(replacement)