"""String searching, slicing, splitting and joining helpers.

Indices are returned instead of pointers: a search that finds nothing gives
``None``. Looking for the NUL character finds the end of the string, as a
terminated string would.
"""

from __future__ import annotations

from typing import Callable, Optional

__all__ = [
    "find_char",
    "find_last_char",
    "find_within",
    "compare",
    "substring",
    "trim",
    "split",
    "join",
    "bounded_copy",
    "bounded_concat",
    "map_indexed",
]

_NUL = "\0"


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def find_char(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    if _single(c) == _NUL:
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def find_last_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    if _single(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle matches at 0. Only the first occurrence counts: if it
    starts within the bound but runs past it, the result is None.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    if index < 0 or index >= length:
        return None
    if index + len(needle) > length:
        return None
    return index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ (the end of a string counting as code 0), or 0.
    """
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: str) -> str:
    """Strip every character in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("trim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    if s is None:
        raise TypeError("split needs a string")
    return [piece for piece in s.split(_single(sep)) if piece]


def join(s1: Optional[str], s2: str) -> str:
    """Concatenate two strings; a missing first string counts as empty."""
    if s2 is None:
        raise TypeError("join needs a second string")
    return (s1 or "") + s2


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the buffer's contents and the full length of ``src``, so a
    truncated copy is one where the length is at least ``size``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the buffer's contents and the length the result would have had
    without the bound: ``len(src) + min(len(dst), size)``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    wanted = len(src) + min(len(dst), size)
    if size == 0:
        return dst, wanted
    room = size - 1 - len(dst)
    if room <= 0:
        return dst, wanted
    return dst + src[:room], wanted


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of ``s``."""
    if s is None or func is None:
        raise TypeError("map_indexed needs a string and a function")
    return "".join(func(i, ch) for i, ch in enumerate(s))