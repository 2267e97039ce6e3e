"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Classification functions return ``bool``; case conversions return a
value of the same kind they were given.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """Return True if *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """Return True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True if *c* is a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def toupper(c: CharLike) -> CharLike:
    """Return the upper-case form of an ASCII lower-case letter, else *c*."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - (ord("a") - ord("A")))
    return c


def tolower(c: CharLike) -> CharLike:
    """Return the lower-case form of an ASCII upper-case letter, else *c*."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + (ord("a") - ord("A")))
    return c