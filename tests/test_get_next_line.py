import os

import pytest

from ftlib.get_next_line import LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


@pytest.fixture
def make_fd():
    opened = []

    def factory(data: bytes) -> int:
        fd = _pipe_with(data)
        opened.append(fd)
        return fd

    yield factory
    for fd in opened:
        os.close(fd)


def test_lines_keep_newlines(make_fd):
    data = b"first\nsecond\nthird"
    reader = LineReader(make_fd(data), 2048)
    lines = list(reader)
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert len(lines) == 3


@pytest.mark.parametrize("size", [1, 2, 3, 5, 64])
def test_buffer_size_does_not_change_result(make_fd, size):
    data = b"alpha\n\nbeta\ngamma delta\n"
    lines = list(LineReader(make_fd(data), size))
    assert lines == data.splitlines(keepends=True)


def test_empty_input_gives_none(make_fd):
    reader = LineReader(make_fd(b""), 8)
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_lines_returned(make_fd):
    reader = LineReader(make_fd(b"\n\n"), 4)
    assert reader.read_line() == b"\n"
    assert reader.read_line() == b"\n"
    assert reader.read_line() is None


def test_nul_bytes_skipped(make_fd):
    reader = LineReader(make_fd(b"a\0b\n"), 16)
    assert reader.read_line() == b"ab\n"


def test_long_line_across_many_buffers(make_fd):
    data = b"y" * 5000 + b"\n"
    reader = LineReader(make_fd(data), 7)
    assert reader.read_line() == data
    assert reader.read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0, 0)


def test_bad_fd_raises_oserror():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        LineReader(read_fd, 4).read_line()


def test_get_next_line_interleaved(make_fd):
    fd_a = make_fd(b"a1\na2\n")
    fd_b = make_fd(b"b1\nb2")
    assert get_next_line(fd_a) == b"a1\n"
    assert get_next_line(fd_b) == b"b1\n"
    assert get_next_line(fd_a) == b"a2\n"
    assert get_next_line(fd_b) == b"b2"
    assert get_next_line(fd_a) is None
    assert get_next_line(fd_b) is None


def test_get_next_line_from_file(tmp_path):
    path = tmp_path / "input.txt"
    text = b"one\ntwo\nthree\n"
    path.write_bytes(text)
    fd = os.open(path, os.O_RDONLY)
    try:
        collected = []
        while (line := get_next_line(fd)) is not None:
            collected.append(line)
    finally:
        os.close(fd)
    assert b"".join(collected) == text
    assert len(collected) == 3


def test_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-1)