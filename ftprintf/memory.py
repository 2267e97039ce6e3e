"""Byte-buffer primitives over ``bytearray`` and other byte sequences."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(name: str, length: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    if n > length:
        raise ValueError(f"{name}: length {n} exceeds buffer of {length} bytes")


def memset(buf: bytearray, ch: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with ``ch & 0xFF`` and return *buf*."""
    _check_span("memset", len(buf), n)
    buf[:n] = bytes([ch & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size yields a one-byte buffer. A request whose size
    would overflow the platform's ``size_t`` raises ``MemoryError``.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must be non-negative")
    if count == 0 or size == 0:
        count = size = 1
    if count > SIZE_MAX // size:
        raise MemoryError(f"calloc: {count} * {size} bytes overflows")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into *dst* and return *dst*."""
    _check_span("memcpy", len(src), n)
    _check_span("memcpy", len(dst), n)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes within *buf* from offset *src* to offset *dst*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buf*.
    """
    if dst < 0 or src < 0:
        raise ValueError("memmove: offsets must be non-negative")
    _check_span("memmove", len(buf) - src, n)
    _check_span("memmove", len(buf) - dst, n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` within the
    first *n* bytes of *data*, or ``None`` if there is none."""
    if n < 0:
        raise ValueError("memchr: negative length")
    index = bytes(data).find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(s1: bytes | bytearray, s2: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes of *s1* and *s2* as unsigned bytes.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_span("memcmp", len(s1), n)
    _check_span("memcmp", len(s2), n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0