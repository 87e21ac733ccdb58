import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.lines import LineReader

TEXT = st.text(alphabet=st.characters(blacklist_characters="\0", blacklist_categories=("Cs",)))
DATA = st.binary().map(lambda b: b.replace(b"\0", b""))
SIZES = st.integers(min_value=1, max_value=40)


def _lines(data, size):
    stream = io.StringIO(data, newline="") if isinstance(data, str) else io.BytesIO(data)
    return list(LineReader(stream, size))


@given(TEXT, SIZES)
def test_text_lines_rejoin_to_input(text, size):
    assert "".join(_lines(text, size)) == text


@given(DATA, SIZES)
def test_binary_lines_rejoin_to_input(data, size):
    assert b"".join(_lines(data, size)) == data


@given(TEXT, SIZES)
def test_each_line_holds_one_newline_at_its_end(text, size):
    lines = _lines(text, size)
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1
    expected = text.count("\n") + (1 if text and not text.endswith("\n") else 0)
    assert len(lines) == expected


@given(DATA)
def test_buffer_size_does_not_change_lines(data):
    assert _lines(data, 1) == _lines(data, 64)


def test_lines_keep_newlines_and_last_may_lack_one():
    reader = LineReader(io.BytesIO(b"one\ntwo\nthree"), 100)
    assert list(reader) == [b"one\n", b"two\n", b"three"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.StringIO("only\n"), 3)
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_data_after_nul_in_a_read_is_lost():
    assert _lines(b"ab\0cd\nef\n", 10) == [b"ab"]


def test_blank_lines_are_kept():
    assert _lines("\n\nx\n", 2) == ["\n", "\n", "x\n"]


def test_non_positive_buffer_size_raises():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), -5)


def test_none_stream_raises():
    with pytest.raises(TypeError):
        LineReader(None)