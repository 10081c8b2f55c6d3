"""NUL-terminated string primitives: length, search, compare and bounded copy.

A C string here is a ``str`` or a bytes-like object. Its logical content ends
at the first NUL character or byte, or at the end of the object if it has
none. Positions are returned as indexes into that content, and ``None`` means
"not found".

``strlcpy`` and ``strlcat`` write into a writable byte buffer such as a
``bytearray``. Their ``size`` is the size of the destination and may not be
larger than the buffer.
"""

from __future__ import annotations

from typing import Union

_CString = Union[str, bytes, bytearray, memoryview]


def _logical(s: _CString) -> str | bytes:
    """Return the content of ``s`` up to its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        s = bytes(memoryview(s).cast("B"))
        end = s.find(0)
    return s if end < 0 else s[:end]


def _source_bytes(src) -> bytes:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like, not str")
    return _logical(src)


def _writable(buf) -> memoryview:
    view = memoryview(buf).cast("B")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def _check_size(size: int, view: memoryview) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(view):
        raise ValueError(f"size {size} exceeds buffer of length {len(view)}")


def _target(c: int | str, text_is_str: bool) -> int | None:
    """Return the code to look for, or None if no character can match ``c``.

    Codes above 127 are reduced modulo 128. In byte strings a negative code
    in -128..-1 stands for the byte with the same bit pattern.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        c = ord(c)
    if c > 127:
        c %= 128
    if c >= 0:
        return c
    if not text_is_str and c >= -128:
        return c + 256
    return None


def _needle(text: str | bytes, code: int) -> str | bytes:
    return chr(code) if isinstance(text, str) else bytes([code])


def _codes(text: str | bytes) -> list[int]:
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def strlen(s: _CString) -> int:
    """Return the number of characters before the first NUL."""
    return len(_logical(s))


def strchr(s: _CString, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    The terminator counts as part of the string, so searching for NUL
    returns the string's length.
    """
    text = _logical(s)
    code = _target(c, isinstance(text, str))
    if code is None:
        return None
    if code == 0:
        return len(text)
    index = text.find(_needle(text, code))
    return None if index < 0 else index


def strrchr(s: _CString, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    The terminator counts as part of the string, so searching for NUL
    returns the string's length.
    """
    text = _logical(s)
    code = _target(c, isinstance(text, str))
    if code is None:
        return None
    if code == 0:
        return len(text)
    index = text.rfind(_needle(text, code))
    return None if index < 0 else index


def strnstr(big: _CString, little: _CString, length: int) -> int | None:
    """Find ``little`` in ``big`` looking at no more than ``length`` characters.

    Returns the index of the first occurrence that lies wholly inside the
    first ``length`` characters, 0 if ``little`` is empty, otherwise None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _logical(big)
    needle = _logical(little)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: _CString, s2: _CString, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match, otherwise the difference between the first
    pair of differing characters taken as unsigned codes.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    a = _codes(_logical(s1)) + [0]
    b = _codes(_logical(s2)) + [0]
    for position, (x, y) in enumerate(zip(a, b)):
        if x != y or x == 0 or position == n - 1:
            return x - y
    return 0


def strlcpy(dst, src, size: int) -> int:
    """Copy up to ``size - 1`` bytes of ``src`` into ``dst`` and NUL-terminate it.

    Nothing is written when ``size`` is 0. Returns the length of ``src``.
    """
    view = _writable(dst)
    _check_size(size, view)
    text = _source_bytes(src)
    if size == 0:
        return len(text)
    count = min(len(text), size - 1)
    view[:count] = text[:count]
    view[count] = 0
    return len(text)


def strlcat(dst, src, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within a buffer of ``size`` bytes.

    Returns the length of ``src`` plus the smaller of ``size`` and the
    initial length of the string in ``dst``.
    """
    view = _writable(dst)
    _check_size(size, view)
    text = _source_bytes(src)
    current = bytes(view)
    dstlen = current.find(0)
    if dstlen < 0:
        dstlen = len(current)
    total = len(text) + min(dstlen, size)
    if dstlen < size:
        count = min(size - dstlen - 1, len(text))
        view[dstlen:dstlen + count] = text[:count]
        view[dstlen + count] = 0
    return total