"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

_SIZE_MAX = 18446744073709551615


def _check_length(buffer: bytes | bytearray, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buffer):
        raise ValueError(f"{what} holds {len(buffer)} bytes, fewer than {n}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_length(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size > 0 and count > _SIZE_MAX // size:
        raise OverflowError("count * size does not fit in the address space")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    Only the low byte of ``value`` is compared. ``None`` when not found.
    """
    _check_length(data, n)
    index = data.find(bytes([value & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned bytes.

    Returns the difference of the first differing pair, or 0.
    """
    _check_length(first, n, "first")
    _check_length(second, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source was copied first.
    """
    if min(dest_offset, src_offset, n) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("region lies outside the buffer")
    buffer[dest_offset:dest_offset + n] = buffer[src_offset:src_offset + n]
    return buffer