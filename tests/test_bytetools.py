import pytest

from pushswap.bytetools import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_memset_uses_low_byte_of_value():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytearray([0x41] * 4)


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"hello")
    bzero(buffer, 2)
    assert buffer == bytearray(b"\x00\x00llo")


def test_bzero_with_zero_count_leaves_buffer():
    buffer = bytearray(b"hello")
    bzero(buffer, 0)
    assert buffer == bytearray(b"hello")


@pytest.mark.parametrize("count,size", [(0, 4), (3, 4), (5, 1), (7, 0)])
def test_calloc_returns_zeroed_buffer_of_product_length(count, size):
    buffer = calloc(count, size)
    assert len(buffer) == count * size
    assert all(byte == 0 for byte in buffer)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd..")


def test_memcpy_round_trip_full_length():
    src = bytes(range(16))
    dest = bytearray(16)
    memcpy(dest, src, len(src))
    assert bytes(dest) == src


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 5)


def test_memccpy_stops_after_stop_byte():
    dest = bytearray(b"--------")
    offset = memccpy(dest, b"abc:def", ord(":"), 7)
    assert offset == len(b"abc:")
    assert dest == bytearray(b"abc:----")


def test_memccpy_without_stop_copies_count_and_returns_none():
    dest = bytearray(b"-----")
    offset = memccpy(dest, b"abcde", ord("z"), 4)
    assert offset is None
    assert dest == bytearray(b"abcd-")


def test_memccpy_stop_beyond_count_is_not_found():
    dest = bytearray(5)
    assert memccpy(dest, b"abcde", ord("e"), 3) is None
    assert dest[:3] == bytearray(b"abc")


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_count():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x103, 3) == data.index(3)


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcmp_is_antisymmetric():
    first, second = b"\x10\x80\x01", b"\x10\x01\xff"
    assert memcmp(first, second, 3) == -memcmp(second, first, 3)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    result = memmove(buffer, 2, 0, 4)
    assert result is buffer
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)