import io

import pytest

from pushswap.linereader import BUFFER_SIZE, LineReader, read_lines


class _RecordingStream:
    def __init__(self, text):
        self._inner = io.StringIO(text)
        self.requests = []

    def read(self, size):
        self.requests.append(size)
        return self._inner.read(size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_iteration_yields_complete_lines():
    assert list(read_lines(io.StringIO("sa\npb\nrra\n"))) == ["sa", "pb", "rra"]


def test_unterminated_last_line_is_not_yielded():
    assert list(read_lines(io.StringIO("sa\npb"))) == ["sa"]


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []


def test_empty_lines_are_kept():
    assert list(read_lines(io.StringIO("\n\nra\n"))) == ["", "", "ra"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, BUFFER_SIZE, 100])
def test_chunk_size_does_not_change_lines(size):
    text = "rra\nrrb\n" + "x" * 70 + "\nss\n"
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == text.split("\n")[:-1]


def test_read_line_returns_remainder_then_empty():
    reader = LineReader(io.StringIO("one\ntwo"), 2)
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two"
    assert reader.read_line() == ""
    assert reader.read_line() == ""


def test_requests_use_buffer_size():
    stream = _RecordingStream("pa\npb\n")
    reader = LineReader(stream, 4)
    assert list(reader) == ["pa", "pb"]
    assert stream.requests
    assert all(size == 4 for size in stream.requests)


def test_default_buffer_size():
    stream = _RecordingStream("sa\n")
    LineReader(stream).read_line()
    assert stream.requests[0] == BUFFER_SIZE


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), size)


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).read_line()


def test_lines_buffered_past_newline_are_not_lost():
    reader = LineReader(io.StringIO("a\nb\nc\n"), 64)
    assert reader.read_line() == "a\n"
    assert list(reader) == ["b", "c"]