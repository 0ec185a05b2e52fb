"""A small printf-style formatter.

A conversion is written ``%[flags][width][.precision]type`` where the flags
are ``0``, ``-``, ``+``, space and ``#``. The supported types are ``c``,
``s``, ``p``, ``d``, ``i``, ``u``, ``x``, ``X`` and ``%``. An unknown type
character is swallowed and prints nothing. Padding follows the rules of the
formatter this module mirrors exactly, including its less common
placements. For example, the sign of a space-padded negative number comes
before the padding.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

from .numbers import atoi, number_length, uitoa

__all__ = [
    "FormatOption",
    "parse_option",
    "format_char",
    "format_str",
    "format_int",
    "format_unsigned",
    "format_hex",
    "format_ptr",
    "sformat",
    "printf",
]

_NULL_TEXT = "(null)"
_CONSUMING = frozenset("cspdiuxX")


@dataclass
class FormatOption:
    """The flags, width, precision and type of one conversion.

    ``justify`` is ``""``, ``"0"`` or ``"-"``; ``sign`` is ``""``, ``"+"``
    or ``" "``. A precision of -1 means none was given. ``step`` is how many
    characters of the specification precede the type character.
    """

    justify: str = ""
    sign: str = ""
    alternate: bool = False
    precision: int = -1
    width: int = 0
    conversion: str = ""
    step: int = 0
    dot: bool = False


def _apply_flag(ch: str, option: FormatOption) -> bool:
    if ch in "0-":
        option.justify = "0" if ch == "0" and not option.justify else "-"
    elif ch in "+ ":
        option.sign = " " if ch == " " and not option.sign else "+"
    elif ch == "#":
        option.alternate = True
    else:
        return False
    return True


def parse_option(spec: str) -> FormatOption:
    """Parse the text that follows a ``%`` into a FormatOption."""
    option = FormatOption()
    i = 0
    while i < len(spec) and _apply_flag(spec[i], option):
        i += 1
    if i < len(spec) and "0" <= spec[i] <= "9":
        option.width = atoi(spec[i:])
        i += number_length(option.width)
    if i < len(spec) and spec[i] == ".":
        option.dot = True
        option.precision = atoi(spec[i + 1:])
        i += number_length(option.precision) + 1 if option.precision else 1
    option.conversion = spec[i] if i < len(spec) else ""
    option.step = i
    return option


def _pad(ch: str, count: int) -> str:
    return ch * count if count > 0 else ""


def _option(option: Optional[FormatOption]) -> FormatOption:
    return FormatOption() if option is None else option


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def format_char(c: Union[str, int], option: Optional[FormatOption] = None) -> str:
    """Format one character, given as a string or a character code."""
    option = _option(option)
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c & 0xFF)
    elif not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a character, got {c!r}")
    pieces = []
    if option.width > 1 and option.justify == "0":
        pieces.append(_pad("0", option.width - 1))
    elif option.width > 1 and option.justify != "-":
        pieces.append(_pad(" ", option.width - 1))
    pieces.append(c)
    if option.width > 1 and option.justify == "-":
        pieces.append(_pad(" ", option.width - 1))
    return "".join(pieces)


def format_str(s: Optional[str], option: Optional[FormatOption] = None) -> str:
    """Format a string; None prints as ``(null)``."""
    option = _option(option)
    if s is None:
        s = _NULL_TEXT
    elif not isinstance(s, str):
        raise TypeError(f"expected a string, got {s!r}")
    precision = option.precision
    if precision < 0 or precision > len(s):
        precision = len(s)
    pieces = []
    if option.justify == "0" and option.width > precision and not option.dot:
        pieces.append(_pad("0", option.width - precision))
    elif option.justify != "-" and option.width > precision:
        pieces.append(_pad(" ", option.width - precision))
    pieces.append(s[:precision])
    if option.justify == "-" and option.width > precision:
        pieces.append(_pad(" ", option.width - precision))
    return "".join(pieces)


def _check_int(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    return n


def format_int(n: int, option: Optional[FormatOption] = None) -> str:
    """Format a signed 32-bit integer."""
    option = _option(option)
    n = _to_int32(_check_int(n))
    length = number_length(n)
    pieces = []
    if n < 0:
        pieces.append("-")
    elif option.sign:
        pieces.append(option.sign)
    if option.width > length and not option.justify:
        pieces.append(_pad(" ", option.width - length))
    elif option.width > length and option.justify == "0":
        pieces.append(_pad("0", option.width - length))
    pieces.append(_pad("0", option.precision - length + (n < 0)))
    pieces.append(str(abs(n)))
    if option.width > length and option.justify == "-":
        pieces.append(_pad(" ", option.width - length))
    return "".join(pieces)


def format_unsigned(n: int, option: Optional[FormatOption] = None) -> str:
    """Format an integer as an unsigned 32-bit value."""
    option = _option(option)
    n = _check_int(n) & 0xFFFFFFFF
    digits = uitoa(n) if n else "0"
    length = len(digits)
    pieces = []
    if option.width > length and not option.justify:
        pieces.append(_pad(" ", option.width - length))
    elif option.width > length and option.justify == "0":
        pieces.append(_pad("0", option.width - length))
    pieces.append(_pad("0", option.precision - length))
    pieces.append(digits)
    if option.width > length and option.justify == "-":
        pieces.append(_pad(" ", option.width - length))
    return "".join(pieces)


def format_hex(n: int, option: Optional[FormatOption] = None) -> str:
    """Format an unsigned 32-bit value in hexadecimal; ``X`` gives upper case."""
    option = _option(option)
    n = _check_int(n) & 0xFFFFFFFF
    upper = option.conversion == "X"
    digits = format(n, "X" if upper else "x")
    length = len(digits)
    pieces = []
    written = 0
    if option.alternate and n:
        pieces.append("0X" if upper else "0x")
        written += 2
    if option.precision > length and not option.justify:
        zeros = _pad("0", option.precision - length)
        pieces.append(zeros)
        written += len(zeros)
    if option.width > length + written and option.justify == "0":
        zeros = _pad("0", option.width - length - written)
        pieces.append(zeros)
        written += len(zeros)
    pieces.append(digits)
    if option.justify == "-":
        pieces.append(_pad(" ", option.width - length - written))
    return "".join(pieces)


def format_ptr(ptr: int, option: Optional[FormatOption] = None) -> str:
    """Format a 64-bit address as ``0x`` followed by lower-case hex digits.

    Only zero padding and left justification widen the result.
    """
    option = _option(option)
    ptr = _check_int(ptr) & 0xFFFFFFFFFFFFFFFF
    digits = format(ptr, "x")
    written = 2 + len(digits)
    pieces = ["0x"]
    if option.width > written and option.justify == "0":
        pieces.append(_pad("0", option.width - written))
        written = option.width
    pieces.append(digits)
    if option.width > written and option.justify == "-":
        pieces.append(_pad(" ", option.width - written))
    return "".join(pieces)


def _convert(option: FormatOption, args: Iterator[Any]) -> str:
    conversion = option.conversion
    if conversion == "%":
        return "%"
    if conversion not in _CONSUMING:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if conversion == "c":
        return format_char(value, option)
    if conversion == "s":
        return format_str(value, option)
    if conversion == "p":
        return format_ptr(value, option)
    if conversion in "di":
        return format_int(value, option)
    if conversion == "u":
        return format_unsigned(value, option)
    return format_hex(value, option)


def sformat(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if fmt is None:
        return ""
    values = iter(args)
    pieces = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            option = parse_option(fmt[i + 1:])
            pieces.append(_convert(option, values))
            i += option.step + 2
        else:
            pieces.append(fmt[i])
            i += 1
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sformat(fmt, *args)
    sys.stdout.write(text)
    return len(text)