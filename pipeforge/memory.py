"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

import operator
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: BytesLike) -> int:
    length = operator.index(length)
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )
    return length


def _check_region(buffer: BytesLike, offset: int, length: int) -> int:
    offset = operator.index(offset)
    if offset < 0 or offset + length > len(buffer):
        raise ValueError(
            f"region at {offset} of length {length} lies outside the buffer"
        )
    return offset


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with the low byte of ``value``."""
    length = _check_length(length, buffer)
    buffer[:length] = bytes([operator.index(value) & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    length = _check_length(length, data)
    index = bytes(data[:length]).find(operator.index(value) & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, or 0."""
    length = _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    length = _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the copy behaves as if made through a temporary.
    """
    length = _check_length(length, buffer)
    dest = _check_region(buffer, dest, length)
    src = _check_region(buffer, src, length)
    if length:
        buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer