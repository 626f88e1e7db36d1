import io

import pytest

from cubescape.lines import LineReader, iter_lines


def test_read_line_keeps_newline():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_blank_lines_are_returned():
    reader = LineReader(io.StringIO("\n\nx\n"))
    assert list(reader) == ["\n", "\n", "x\n"]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"NO a.png\nF 1,2,3\n"))
    assert reader.read_line() == b"NO a.png\n"
    assert reader.read_line() == b"F 1,2,3\n"
    assert reader.read_line() is None


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 4096])
@pytest.mark.parametrize("text", ["one\ntwo\nthree", "a\n", "\n", "no newline", "x\n\ny\n"])
def test_round_trip_any_chunk_size(text, chunk_size):
    lines = list(LineReader(io.StringIO(text), chunk_size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_iter_lines_matches_readlines():
    text = "111\n101\n111\n"
    assert list(iter_lines(io.StringIO(text))) == io.StringIO(text).readlines()


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_bad_chunk_size(chunk_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), chunk_size)