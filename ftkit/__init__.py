"""Character, number, string, byte-buffer, linked-list, line-reading, error-reporting and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "text",
    "memory",
    "linked",
    "output",
    "lines",
    "errors",
    "formatting",
]