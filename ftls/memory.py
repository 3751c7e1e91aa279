"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_ALLOCATION_LIMIT = 4294967295


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer size {len(buffer)}")


def mem_set(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return mem_set(buffer, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ValueError for negative sizes and MemoryError when the total
    exceeds 4294967295 bytes.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _ALLOCATION_LIMIT:
        raise MemoryError(f"allocation of {total} bytes exceeds the limit")
    return bytearray(total)


def mem_chr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``; correct even when the two overlap."""
    if dest is None and src is None:
        return None
    return mem_copy(dest, src, n)