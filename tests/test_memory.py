import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    mem_chr,
    mem_cmp,
    mem_copy,
    mem_move,
    mem_set,
)


def test_mem_set_worked_example():
    buffer = bytearray(b"Hello, World!")
    view = memoryview(buffer)[7:]
    result = mem_set(view, ord("A"), 5)
    assert bytes(result[:5]) == b"AAAAA"
    assert bytes(result[5:]) == b"!"
    view.release()
    assert buffer == bytearray(b"Hello, AAAAA!")


def test_mem_set_returns_dest_and_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = mem_set(buffer, ord("z"), 3)
    assert result is buffer
    assert buffer[:3] == bytes([ord("z")]) * 3
    assert buffer[3:] == b"def"


def test_mem_set_masks_fill_value():
    first = mem_set(bytearray(4), 0x141, 4)
    second = mem_set(bytearray(4), 0x41, 4)
    assert first == second


def test_mem_set_rejects_read_only_buffer():
    with pytest.raises(TypeError):
        mem_set(b"abc", 0, 1)


def test_mem_set_rejects_count_past_end():
    with pytest.raises(ValueError):
        mem_set(bytearray(3), 0, 4)


def test_mem_set_rejects_negative_count():
    with pytest.raises(ValueError):
        mem_set(bytearray(3), 0, -1)


def test_bzero_clears_prefix():
    buffer = bytearray(b"Hello, World!")
    bzero(buffer, 5)
    assert buffer[:5] == bytes(5)
    assert buffer[5:] == b", World!"


def test_mem_copy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    result = mem_copy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abcxxx")


def test_mem_copy_rejects_short_source():
    with pytest.raises(ValueError):
        mem_copy(bytearray(5), b"ab", 3)


def test_mem_move_overlapping_forward():
    buffer = bytearray(b"ABCDEF")
    assert mem_move(buffer, 2, 0, 4) is buffer
    assert buffer == bytearray(b"ABABCD")


def test_mem_move_overlapping_backward():
    buffer = bytearray(b"ABCDEF")
    mem_move(buffer, 0, 2, 4)
    assert buffer == bytearray(b"CDEFEF")


def test_mem_move_zero_leaves_buffer():
    buffer = bytearray(b"ABCDEF")
    mem_move(buffer, 1, 3, 0)
    assert buffer == bytearray(b"ABCDEF")


def test_mem_move_rejects_out_of_range():
    with pytest.raises(ValueError):
        mem_move(bytearray(b"ABCDEF"), 4, 0, 3)


@given(
    data=st.binary(min_size=1, max_size=40),
    dest=st.integers(min_value=0, max_value=39),
    src=st.integers(min_value=0, max_value=39),
    n=st.integers(min_value=0, max_value=40),
)
def test_mem_move_places_source_bytes(data, dest, src, n):
    length = len(data)
    dest %= length
    src %= length
    n = min(n, length - dest, length - src)
    buffer = bytearray(data)
    mem_move(buffer, dest, src, n)
    assert bytes(buffer[dest : dest + n]) == data[src : src + n]
    assert len(buffer) == length


def test_mem_chr_finds_first_match():
    data = b"Hello, world!"
    index = mem_chr(data, ord("o"), len(data))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_mem_chr_zero_length_is_none():
    assert mem_chr(b"Hello, world!", ord("o"), 0) is None


def test_mem_chr_missing_is_none():
    assert mem_chr(b"1234567890", ord("x"), 10) is None


def test_mem_chr_respects_limit():
    assert mem_chr(b"abcdefg", ord("g"), 6) is None
    assert mem_chr(b"abcdefg", ord("g"), 7) == len(b"abcdefg") - 1


def test_mem_chr_masks_search_value():
    assert mem_chr(b"abc", ord("b") + 256, 3) == mem_chr(b"abc", ord("b"), 3)


def test_mem_cmp_cases():
    a = b"Hello World!\0"
    b = b"Hello World\0"
    c = b"Hello World\0"
    d = b"Hello Worly\0"
    assert mem_cmp(a, b, 11) == 0
    assert mem_cmp(a, c, 12) > 0
    assert mem_cmp(a, d, 12) < 0
    assert mem_cmp(a, c, 5) == 0


def test_mem_cmp_treats_bytes_as_unsigned():
    assert mem_cmp(b"\xff", b"\x01", 1) > 0


def test_mem_cmp_rejects_count_past_end():
    with pytest.raises(ValueError):
        mem_cmp(b"ab", b"abc", 3)


@given(
    a=st.binary(min_size=8, max_size=8),
    b=st.binary(min_size=8, max_size=8),
    n=st.integers(min_value=0, max_value=8),
)
def test_mem_cmp_antisymmetric_and_ordered(a, b, n):
    result = mem_cmp(a, b, n)
    assert result == -mem_cmp(b, a, n)
    assert (result < 0) == (a[:n] < b[:n])
    assert (result == 0) == (a[:n] == b[:n])


def test_calloc_zero_filled():
    block = calloc(5, 4)
    assert isinstance(block, bytearray)
    assert len(block) == 5 * 4
    assert not any(block)


def test_calloc_zero_members_or_size_is_empty():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)