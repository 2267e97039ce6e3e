"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

from ftprintf.strings import strdup
from ftprintf.transform import itoa


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def putchar_fd(c: int | str, stream: TextIO) -> int:
    """Write one character to *stream* and return 1.

    *c* may be a one-character string or a character code, which is
    truncated to a byte.
    """
    stream.write(_char(c))
    return 1


def putstr_fd(s: str | None, stream: TextIO) -> int:
    """Write *s* up to its first NUL to *stream*.

    ``None`` writes nothing. Returns the number of characters written.
    """
    if s is None:
        return 0
    text = strdup(s)
    stream.write(text)
    return len(text)


def putendl_fd(s: str | None, stream: TextIO) -> int:
    """Write *s* followed by a newline to *stream*.

    ``None`` writes nothing, not even the newline. Returns the number of
    characters written.
    """
    if s is None:
        return 0
    return putstr_fd(s, stream) + putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> int:
    """Write the decimal form of *n* to *stream* and return its length."""
    return putstr_fd(itoa(n), stream)