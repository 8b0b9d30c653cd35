"""Byte-buffer operations: fill, copy, move, search and compare.

Buffers are writable byte sequences such as ``bytearray`` or a writable
``memoryview``. Every length is checked against the buffers it touches,
and an out-of-range length raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "SIZE_MAX",
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
]

SIZE_MAX = 2**64 - 1

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(name: str, buf: ReadableBuffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    if n > len(buf):
        raise IndexError(f"{name}: length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_length("memset", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length("bzero", buf, n)
    buf[:n] = bytes(n)


def memcpy(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``.

    Nothing is copied when ``n`` is zero or when ``dest`` and ``src`` are
    the same object.
    """
    if n == 0 or dest is src:
        return dest
    if dest is None or src is None:
        raise TypeError("memcpy: buffers must not be None when copying")
    _check_length("memcpy", src, n)
    _check_length("memcpy", dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` within ``buf``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if n == 0 or dest == src:
        return buf
    for offset in (dest, src):
        if offset < 0:
            raise IndexError(f"memmove: offset must not be negative, got {offset}")
        _check_length("memmove", buf, offset + n)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length("memchr", buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length("memcmp", a, n)
    _check_length("memcmp", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises ``ValueError`` for a negative count or size and
    ``OverflowError`` when the total would exceed ``SIZE_MAX``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("calloc: requested size exceeds SIZE_MAX")
    return bytearray(nmemb * size)