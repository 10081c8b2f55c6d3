"""Byte-buffer primitives: fill, zero, allocate, search, compare and copy.

Buffers are bytes-like objects; functions that write need a writable one
(``bytearray``, writable ``memoryview`` and the like). A count ``n`` that
is negative or larger than a buffer it covers raises ``ValueError``.
"""

from __future__ import annotations

from typing import TypeVar

_Buf = TypeVar("_Buf")


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(memoryview(buf).cast("B")):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def _bytes_view(buf) -> memoryview:
    return memoryview(buf).cast("B")


def memset(buf: _Buf, c: int, n: int) -> _Buf:
    """Set the first ``n`` bytes of ``buf`` to ``c`` as an unsigned byte; return ``buf``."""
    _check_count(n, buf)
    view = _bytes_view(buf)
    if view.readonly:
        raise TypeError("buffer is read-only")
    view[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: _Buf, n: int) -> _Buf:
    """Zero the first ``n`` bytes of ``buf``; return ``buf``."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(_bytes_view(buf)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they are equal, otherwise the difference between the
    first pair of differing bytes.
    """
    _check_count(n, s1, s2)
    a = _bytes_view(s1)[:n]
    b = _bytes_view(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return x - y
    return 0


def memmove(dest: _Buf, src, n: int) -> _Buf:
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap; return ``dest``."""
    _check_count(n, dest, src)
    view = _bytes_view(dest)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    view[:n] = bytes(_bytes_view(src)[:n])
    return dest


def memcpy(dest: _Buf, src, n: int) -> _Buf:
    """Copy ``n`` bytes from ``src`` to ``dest``; return ``dest``."""
    return memmove(dest, src, n)