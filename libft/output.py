"""Write characters, strings, lines and integers to a file descriptor.

``fd`` is an integer file descriptor or any object with a ``fileno()``
method. Text is encoded as UTF-8 before writing. Byte strings are written
as they are. A string stops at its first NUL, as in :mod:`libft.cstring`.
"""

from __future__ import annotations

import os
from typing import Union

from .cstring import strlen
from .strutil import itoa

_CString = Union[str, bytes, bytearray, memoryview]


def _descriptor(fd) -> int:
    if isinstance(fd, bool):
        raise TypeError("expected a file descriptor, got bool")
    if isinstance(fd, int):
        return fd
    fileno = getattr(fd, "fileno", None)
    if fileno is None:
        raise TypeError(f"expected a file descriptor, got {type(fd).__name__}")
    return fileno()


def _write_all(fd, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying after short writes."""
    descriptor = _descriptor(fd)
    view = memoryview(data)
    while view:
        written = os.write(descriptor, view)
        view = view[written:]


def _encode(s: _CString) -> bytes:
    if isinstance(s, str):
        return s[: strlen(s)].encode("utf-8")
    data = bytes(memoryview(s).cast("B"))
    return data[: strlen(data)]


def putchar_fd(c: int | str, fd) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte; values -128..-1 stand for the
    byte with the same bit pattern. A one-character string is written
    UTF-8 encoded.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        if not -128 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: _CString, fd) -> None:
    """Write the string ``s`` to ``fd``."""
    _write_all(fd, _encode(s))


def putendl_fd(s: _CString, fd) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd) -> None:
    """Write the decimal form of the 32-bit signed integer ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))