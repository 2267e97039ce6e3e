"""String conversion and construction: numbers to and from text, splitting,
joining, trimming and per-character mapping.

Strings are read up to their first ``"\\0"``, if they have one, as a C
string would be.
"""

from __future__ import annotations

from typing import Callable

NUL = "\0"
_WHITESPACE = " \n\t\v\f\r"
_INT_BITS = 32


def _terminated(s: str) -> str:
    """Return *s* up to, not including, its first NUL."""
    return s.split(NUL, 1)[0]


def _char(c: int | str) -> str:
    """Turn a character code or one-character string into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    Values outside the 32-bit signed range wrap around.
    """
    text = _terminated(s).lstrip(_WHITESPACE)
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(-value if negative else value)


def count_digits(n: int) -> int:
    """Return the number of decimal digits in *n*, sign excluded; at least 1."""
    return len(str(abs(int(n))))


def itoa(n: int) -> str:
    """Return the decimal representation of *n*, with a leading ``-`` if
    negative."""
    n = int(n)
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits


def split(s: str, c: int | str) -> list[str]:
    """Split *s* on the delimiter *c*, dropping empty pieces."""
    delimiter = _char(c)
    text = _terminated(s)
    if delimiter == NUL:
        return [text] if text else []
    return [piece for piece in text.split(delimiter) if piece]


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* starting at index *start*.

    A start beyond the end of *s* gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must be non-negative")
    return _terminated(s)[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of *s1* and *s2*."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s1: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s1*."""
    return _terminated(s1).strip(_terminated(charset))


def strmapi(s: str, f: Callable[[int, str], int | str]) -> str:
    """Return a new string whose characters are ``f(index, char)``.

    *f* may return a one-character string or a character code. A NUL
    returned by *f* ends the result there.
    """
    mapped = "".join(_char(f(i, ch)) for i, ch in enumerate(_terminated(s)))
    return _terminated(mapped)


def striteri(s: str, f: Callable[[int, str], int | str | None]) -> str:
    """Call ``f(index, char)`` for each character of *s* in order.

    Where *f* returns a character (or character code) it replaces the
    character at that index; where it returns ``None`` the character is
    kept. Returns the resulting string.
    """
    result = []
    for i, ch in enumerate(_terminated(s)):
        replacement = f(i, ch)
        result.append(ch if replacement is None else _char(replacement))
    return "".join(result)