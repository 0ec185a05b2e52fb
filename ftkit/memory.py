"""Byte-buffer helpers: filling, zeroed allocation, copying, searching and comparing.

Buffers are ``bytearray`` objects (or anything supporting the buffer
protocol for read-only arguments). Byte values are taken modulo 256, as an
``unsigned char`` conversion would.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = ["fill", "zeroed", "copy_into", "find_byte", "compare_bytes"]


def _check_count(count: int, *buffers: BytesLike) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` and return it."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zeroed(count: int, size: int) -> bytearray:
    """Return a new buffer of ``count * size`` zero bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    return bytearray(count * size)


def copy_into(dst: bytearray, src: BytesLike, count: int) -> bytearray:
    """Copy ``count`` bytes of ``src`` to the start of ``dst`` and return ``dst``.

    The source is read in full before anything is written, so a source that
    views the destination itself is copied correctly.
    """
    _check_count(count, dst, src)
    dst[:count] = bytes(src[:count])
    return dst


def find_byte(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def compare_bytes(a: BytesLike, b: BytesLike, count: int) -> int:
    """Compare ``count`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, read as
    unsigned values, or 0 when the ranges are equal.
    """
    _check_count(count, a, b)
    for x, y in zip(bytes(a[:count]), bytes(b[:count])):
        if x != y:
            return x - y
    return 0