"""Operations on raw byte buffers: fill, copy, search and compare."""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memccpy",
    "memchr",
    "memcmp",
    "memmove",
]

Readable = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: Readable) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: Readable, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` into the start of ``dest``."""
    _check_count(count, dest, src)
    if count:
        dest[:count] = bytes(src[:count])
    return dest


def memccpy(dest: bytearray, src: Readable, stop: int, count: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including the first ``stop`` byte.

    At most ``count`` bytes are copied. Returns the offset in ``dest`` just past the
    copied stop byte, or ``None`` if the stop byte did not occur.
    """
    _check_count(count, dest, src)
    chunk = bytes(src[:count])
    found = chunk.find(bytes([stop & 0xFF]))
    copied = found + 1 if found >= 0 else count
    dest[:copied] = chunk[:copied]
    return copied if found >= 0 else None


def memchr(buffer: Readable, value: int, count: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` within ``count`` bytes."""
    _check_count(count, buffer)
    found = bytes(buffer[:count]).find(bytes([value & 0xFF]))
    return found if found >= 0 else None


def memcmp(first: Readable, second: Readable, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(count, first, second)
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    if min(dest, src, count) < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest, src) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer