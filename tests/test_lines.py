import os

import pytest

from minishell.lines import LineReader


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


def _read_all(reader: LineReader, fd: int) -> list[bytes]:
    lines = []
    while (line := reader.next_line(fd)) is not None:
        lines.append(line)
    return lines


def test_lines_keep_newline_and_last_line_without_one():
    fd = _pipe_with(b"hello\nworld")
    reader = LineReader()
    try:
        assert reader.next_line(fd) == b"hello\n"
        assert reader.next_line(fd) == b"world"
        assert reader.next_line(fd) is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 4, 7, 100])
def test_lines_rejoin_to_input(size):
    data = b"first line\n\nsecond\nthird one here\nend"
    fd = _pipe_with(data)
    try:
        lines = _read_all(LineReader(size), fd)
    finally:
        os.close(fd)
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines == data.splitlines(keepends=True)


def test_empty_input_gives_none():
    fd = _pipe_with(b"")
    try:
        assert LineReader().next_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_keep_separate_state(tmp_path):
    a_path = tmp_path / "a.txt"
    b_path = tmp_path / "b.txt"
    a_path.write_bytes(b"a1\na2\n")
    b_path.write_bytes(b"b1\nb2\n")
    fa = os.open(a_path, os.O_RDONLY)
    fb = os.open(b_path, os.O_RDONLY)
    reader = LineReader(100)
    try:
        assert reader.next_line(fa) == b"a1\n"
        assert reader.next_line(fb) == b"b1\n"
        assert reader.next_line(fa) == b"a2\n"
        assert reader.next_line(fb) == b"b2\n"
        assert reader.next_line(fa) is None
        assert reader.next_line(fb) is None
    finally:
        os.close(fa)
        os.close(fb)


@pytest.mark.parametrize("fd", [-1, 1024])
def test_out_of_range_descriptor(fd):
    with pytest.raises(ValueError):
        LineReader().next_line(fd)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)