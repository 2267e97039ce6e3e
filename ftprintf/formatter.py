"""A small printf supporting the conversions ``%c %s %p %d %i %u %x %X %%``.

There are no flags, widths or precisions. An unknown conversion, or a
``%`` at the end of the format, produces nothing and consumes no argument.
Integer arguments are reduced to the width of the C type the conversion
reads: 32 bits for ``d i u x X`` and 64 bits for ``p``.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from ftprintf.strings import strdup
from ftprintf.transform import itoa

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"


def _as_uint32(n: int) -> int:
    return int(n) & _UINT_MASK


def _as_int32(n: int) -> int:
    value = _as_uint32(n)
    return value - (1 << 32) if value >= 1 << 31 else value


def uitoa(n: int) -> str:
    """Return the decimal form of *n* read as an unsigned 32-bit integer."""
    return str(_as_uint32(n))


def hex_len(num: int) -> int:
    """Return the number of hex digits in unsigned 32-bit *num*; 0 for zero."""
    value = _as_uint32(num)
    length = 0
    while value:
        length += 1
        value >>= 4
    return length


def format_hex(num: int, fmt: str) -> str:
    """Return unsigned 32-bit *num* in hex, lower case for ``"x"`` and upper
    case for ``"X"``."""
    if fmt not in ("x", "X"):
        raise ValueError(f"format_hex: format must be 'x' or 'X', got {fmt!r}")
    text = format(_as_uint32(num), "x")
    return text.upper() if fmt == "X" else text


def format_pointer(ptr: int | None) -> str:
    """Return *ptr* as ``0x`` followed by lower-case hex; ``None`` is zero."""
    value = 0 if ptr is None else int(ptr) & _POINTER_MASK
    return "0x" + format(value, "x")


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def format_conversion(spec: str, args: Iterator[Any]) -> str:
    """Render one conversion *spec*, taking its argument from the iterator
    *args*.

    Raises ``TypeError`` when the conversion needs an argument and *args*
    is exhausted.
    """
    if spec == "%":
        return "%"
    if spec not in ("c", "s", "p", "d", "i", "u", "x", "X"):
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return _NULL_STRING if arg is None else strdup(str(arg))
    if spec == "p":
        return format_pointer(arg)
    if spec in ("d", "i"):
        return itoa(_as_int32(arg))
    if spec == "u":
        return uitoa(arg)
    return format_hex(arg, spec)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by *args*.

    The format is read up to its first NUL.
    """
    remaining = iter(args)
    pieces: list[str] = []
    chars = iter(strdup(fmt))
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            pieces.append(format_conversion(spec, remaining) if spec else "")
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file*, standard output by default, and
    return the number of characters written."""
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)