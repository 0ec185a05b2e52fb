"""Writing characters, strings and numbers to a text stream.

Every function takes an optional ``stream``; when it is omitted the text
goes to standard output. Each returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "put_hex",
    "put_ptr",
    "put_set",
]

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def _base16(n: int, digits: str) -> str:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(c, stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return 0
    return _write(s, stream)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline."""
    return put_str(s, stream) + _write("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal text of an integer, with a '-' if negative."""
    return _write(str(n), stream)


def put_hex(n: int, stream: Optional[TextIO] = None, uppercase: bool = False) -> int:
    """Write a non-negative integer in hexadecimal, without prefix."""
    return _write(_base16(n, _UPPER_DIGITS if uppercase else _LOWER_DIGITS), stream)


def put_ptr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an address value in lower-case hexadecimal, without prefix."""
    return _write(_base16(n, _LOWER_DIGITS), stream)


def put_set(c: str, count: int, stream: Optional[TextIO] = None) -> int:
    """Write ``c`` ``count`` times; a count of zero or less writes nothing."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if count <= 0:
        return 0
    return _write(c * count, stream)