"""NUL-terminated string primitives over Python ``str``.

A string is read up to its first ``"\\0"``, if it has one, as a C string
would be. Positions are returned as indices instead of pointers, with
``None`` meaning "not found". Functions that would fill a caller's buffer
return the new contents together with the length they report.
"""

from __future__ import annotations

NUL = "\0"


def _terminated(s: str) -> str:
    """Return *s* up to, not including, its first NUL."""
    return s.split(NUL, 1)[0]


def _char(c: int | str) -> str:
    """Turn a character code or one-character string into a character.

    Integer codes are truncated to a byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(name: str, size: int) -> None:
    if size < 0:
        raise ValueError(f"{name}: negative size {size}")


def strlen(s: str) -> int:
    """Return the number of characters in *s* before its first NUL."""
    return len(_terminated(s))


def strdup(s: str) -> str:
    """Return a copy of *s* up to its first NUL."""
    return str(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*, or ``None``.

    Searching for NUL gives the index of the terminator, ``strlen(s)``.
    """
    ch = _char(c)
    text = _terminated(s)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*, or ``None``.

    Searching for NUL gives the index of the terminator, ``strlen(s)``.
    """
    ch = _char(c)
    text = _terminated(s)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of the first *needle* lying wholly within the first
    *length* characters of *haystack*, or ``None``.

    An empty needle matches at index 0.
    """
    _check_size("strnstr", length)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    window = _terminated(haystack)[:length]
    index = window.find(pattern)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    Returns the code difference of the first differing pair, a missing
    character counting as NUL, or 0 if they agree.
    """
    _check_size("strncmp", n)
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) != len(b):
        return (ord(a[len(b)]) if len(a) > len(b) else 0) - (
            ord(b[len(a)]) if len(b) > len(a) else 0
        )
    return 0


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *dstsize* characters.

    Returns the buffer's new contents, at most ``dstsize - 1`` characters of
    *src*, and ``strlen(src)``. A zero size leaves *dst* as it was.
    """
    _check_size("strlcpy", dstsize)
    text = _terminated(src)
    if dstsize == 0:
        return _terminated(dst), len(text)
    return text[: dstsize - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters.

    Returns the new contents and the length that was tried for:
    ``strlen(dst) + strlen(src)`` when *size* exceeds ``strlen(dst)``,
    otherwise ``size + strlen(src)``.
    """
    _check_size("strlcat", size)
    head = _terminated(dst)
    tail = _terminated(src)
    if size > len(head):
        attempted = len(head) + len(tail)
    else:
        attempted = size + len(tail)
    room = max(0, size - len(head) - 1)
    return head + tail[:room], attempted