"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges count: codes outside them are never letters,
digits or printable.
"""

from __future__ import annotations

from typing import TypeVar

_Char = TypeVar("_Char", int, str)


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, validating its type."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: _Char) -> _Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: _Char) -> _Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code