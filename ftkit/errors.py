"""Reporting fatal errors on standard error."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = [
    "report_error",
    "INVALID_MAP",
    "INVALID_ARGUMENTS",
    "IO_ERROR",
    "UNKNOWN_ERROR",
    "NO_SUCH_FILE",
    "X11_ERROR",
    "TEXTURE_ERROR",
    "FILE_ERROR",
]

INVALID_MAP = "Invalid map"
INVALID_ARGUMENTS = "Invalid arguments"
IO_ERROR = "I/O error"
UNKNOWN_ERROR = "Unknown error"
NO_SUCH_FILE = "No such file or directory"
X11_ERROR = "X11 error"
TEXTURE_ERROR = "Texture error"
FILE_ERROR = "File error"


def report_error(message: str, stream: Optional[TextIO] = None) -> None:
    """Write ``Error``, then ``message``, each on its own line.

    The text goes to standard error unless another stream is given.
    """
    if not isinstance(message, str):
        raise TypeError(f"expected a message string, got {message!r}")
    target = sys.stderr if stream is None else stream
    target.write(f"Error\n{message}\n")