"""String measuring, bounded copying, searching and comparison.

Strings are Python ``str`` values. As with NUL-terminated text, a string
ends at its first ``"\\0"`` if it holds one. Searches return an index into
the string instead of a pointer, or ``None`` when nothing is found.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

CharLike = Union[int, str]


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _char(c: CharLike) -> str:
    """The character to search for; an int is narrowed to a byte as by a char cast."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


@dataclass(frozen=True)
class BoundedResult:
    """Outcome of a size-bounded copy or concatenation.

    ``text`` is what fits in the destination; ``length`` is the length the
    full result would have had, so ``length >= size`` signals truncation.
    """

    text: str
    length: int

    @property
    def truncated(self) -> bool:
        """True when ``text`` is shorter than the full result."""
        return len(self.text) < self.length


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into a destination of ``size`` characters including the terminator.

    With ``size`` 0 nothing is written and ``text`` is empty. ``length`` is
    always the length of ``src``.
    """
    _check_count("size", size)
    source = _terminated(src)
    text = source[: size - 1] if size > 0 else ""
    return BoundedResult(text, len(source))


def strlcat(dst: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters.

    When ``size`` does not exceed the length of ``dst``, ``dst`` is left as it
    is and ``length`` is ``size`` plus the length of ``src``. Otherwise
    ``length`` is the sum of both lengths.
    """
    _check_count("size", size)
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return BoundedResult(head, size + len(tail))
    room = size - 1 - len(head)
    return BoundedResult(head + tail[:room], len(head) + len(tail))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``, or None.

    Searching for the terminator itself yields the string's length.
    """
    text = _terminated(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``, or None.

    Searching for the terminator itself yields the string's length.
    """
    text = _terminated(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of code points that differ,
    or 0 when the strings agree up to ``n`` characters or to their end.
    """
    _check_count("n", n)
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length``
    characters of ``big``, or None. An empty ``little`` is found at 0.
    """
    _check_count("length", length)
    haystack = _terminated(big)
    needle = _terminated(little)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _terminated(s)