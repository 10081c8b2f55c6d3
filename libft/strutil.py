"""Allocating string helpers: copy, slice, join, trim, split, map and number conversion.

Strings may be ``str`` or bytes-like objects; as with the primitives in
:mod:`libft.cstring`, their content ends at the first NUL. Results have the
same kind as the input: ``str`` for ``str``, ``bytes`` for anything bytes-like.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from functools import reduce
from itertools import takewhile
from typing import Any, Union

from .cstring import strlen

_CString = Union[str, bytes, bytearray, memoryview]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _text(s: _CString) -> str | bytes:
    """Return the content of ``s`` up to its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        return s[: strlen(s)]
    data = bytes(memoryview(s).cast("B"))
    return data[: strlen(data)]


def _separator(c: int | str, text: str | bytes) -> str | bytes:
    """Return ``c`` as a one-character value of the same kind as ``text``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        code = ord(c)
    else:
        code = operator.index(c)
    if isinstance(text, str):
        if code < 0:
            raise ValueError(f"character code must not be negative, got {code}")
        return chr(code)
    if not -128 <= code <= 255:
        raise ValueError(f"byte value out of range: {code}")
    return bytes([code & 0xFF])


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    return (value - _INT_MIN) % (1 << _INT_BITS) + _INT_MIN


def strdup(s: _CString) -> str | bytes:
    """Return a copy of the string ``s``."""
    return _text(s)


def substr(s: _CString, start: int, length: int) -> str | bytes:
    """Return at most ``length`` characters of ``s`` beginning at index ``start``.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _text(s)
    return text[start : start + length]


def strjoin(s1: _CString, s2: _CString) -> str | bytes:
    """Return the concatenation of ``s1`` and ``s2``."""
    prefix = _text(s1)
    suffix = _text(s2)
    if type(prefix) is not type(suffix):
        raise TypeError("cannot join a str with a bytes-like string")
    return prefix + suffix


def strtrim(s1: _CString, charset: _CString) -> str | bytes:
    """Return ``s1`` without the characters of ``charset`` at its start and end."""
    text = _text(s1)
    chars = _text(charset)
    if type(text) is not type(chars):
        raise TypeError("string and character set must be of the same kind")
    return text.strip(chars)


def split(s: _CString, c: int | str) -> list[str | bytes]:
    """Split ``s`` on the delimiter ``c``, dropping empty words.

    With NUL as the delimiter the whole string is a single word.
    """
    text = _text(s)
    sep = _separator(c, text)
    if sep in ("\0", b"\0"):
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: _CString, f: Callable[[int, Any], Any]) -> str | bytes:
    """Build a new string from ``f(index, char)`` applied to every character of ``s``.

    For ``str`` input ``f`` receives and returns characters; for bytes-like
    input it receives and returns byte values.
    """
    text = _text(s)
    if isinstance(text, str):
        return "".join(f(index, ch) for index, ch in enumerate(text))
    return bytes(f(index, byte) for index, byte in enumerate(text))


def striteri(s: MutableSequence, f: Callable[[int, Any], Any]) -> None:
    """Apply ``f(index, char)`` to each character of the mutable string ``s``.

    Iteration stops at the first NUL. When ``f`` returns something other than
    None, that value replaces the character in place.
    """
    for index, value in enumerate(s):
        if value in (0, "\0"):
            break
        result = f(index, value)
        if result is not None:
            s[index] = result


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool):
        raise TypeError("expected an integer, got bool")
    value = operator.index(n)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)


def atoi(s: _CString) -> int:
    """Convert the leading decimal number in ``s`` to a 32-bit signed integer.

    Leading ASCII whitespace and one optional sign are accepted; conversion
    stops at the first non-digit. Values out of range wrap around.
    """
    text = _text(s)
    if not isinstance(text, str):
        text = text.decode("latin-1")
    rest = text.lstrip(_WHITESPACE)
    sign = -1 if rest[:1] == "-" else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    digits = takewhile(lambda ch: ch in _DIGITS, rest)
    value = reduce(
        lambda acc, ch: (acc * 10 + ord(ch) - ord("0")) % (1 << _INT_BITS),
        digits,
        0,
    )
    return _wrap_int(sign * value)