import io

import pytest

from fdfview.lines import LineReader, read_lines


@pytest.mark.parametrize("size", [1, 2, 5, 42, 1000])
def test_lines_keep_newlines(size):
    data = "0 1 2\n3 4 5\nlast"
    assert list(read_lines(io.StringIO(data), size)) == ["0 1 2\n", "3 4 5\n", "last"]


@pytest.mark.parametrize("size", [1, 3, 42])
def test_joined_lines_give_back_the_data(size):
    data = b"a\n\nbb\nccc\n\n"
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines)


def test_empty_stream_has_no_line():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_none_repeats_after_the_end():
    reader = LineReader(io.StringIO("x\n"), 4)
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_blank_lines_are_returned():
    assert list(read_lines(io.StringIO("\n\n"))) == ["\n", "\n"]


def test_bytes_stream_gives_bytes():
    reader = LineReader(io.BytesIO(b"10 20\n"))
    assert reader.next_line() == b"10 20\n"


def test_iterating_a_reader():
    reader = LineReader(io.StringIO("p\nq\n"), 1)
    assert list(reader) == ["p\n", "q\n"]


@pytest.mark.parametrize("size", [0, -3])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        read_lines(io.StringIO("a"), size)