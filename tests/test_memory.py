import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 256 + 65, 4)
    assert all(byte == 65 for byte in buf)


def test_memset_zero_length_is_noop():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


@given(st.binary(min_size=1, max_size=64), st.data())
def test_bzero_zeroes_prefix_only(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    bzero(buf, n)
    assert buf[:n] == bytearray(n)
    assert buf[n:] == data[n:]


def test_calloc_zero_gives_one_byte():
    assert calloc(0, 0) == bytearray(1)
    assert len(calloc(0, 5)) == 1


def test_calloc_size_and_contents():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(b"ABCDDEFG")
    result = memcpy(dst, b"skjhdfshfkjlssjdnbfl", 3)
    assert result is dst
    assert dst[:3] == b"skj"
    assert dst[3:] == b"DDEFG"


def test_memcpy_zero_length_leaves_dst():
    dst = bytearray(b"ABCDDEFG")
    memcpy(dst, b"skjhdfshfkjlssjdnbfl", 0)
    assert dst == bytearray(b"ABCDDEFG")


def test_memcpy_source_too_short_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_overlapping_forward():
    buf = bytearray(b"ABCDEFGH")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ABABCDGH")


@given(st.binary(min_size=0, max_size=40), st.data())
def test_memmove_behaves_like_copy_aside(data, draw):
    size = len(data)
    n = draw.draw(st.integers(min_value=0, max_value=size))
    src = draw.draw(st.integers(min_value=0, max_value=size - n))
    dst = draw.draw(st.integers(min_value=0, max_value=size - n))
    buf = bytearray(data)
    result = memmove(buf, dst, src, n)
    assert result is buf
    assert buf[dst:dst + n] == data[src:src + n]
    assert buf[:dst] == data[:dst]
    assert buf[dst + n:] == data[dst + n:]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    assert memchr(b"abcabc", ord("c"), 6) == 2


def test_memchr_respects_length_and_missing():
    assert memchr(b"abcabc", ord("c"), 2) is None
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_truncates_value_to_byte():
    assert memchr(b"\x00\x41", 256 + 0x41, 2) == 1


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x00", b"\xff", 1) == -255


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcmp_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert memcmp(a, b, n) == -memcmp(b, a, n)
    assert (memcmp(a, b, n) == 0) == (a[:n] == b[:n])


def test_memcmp_too_long_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)