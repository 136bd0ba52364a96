import os

import pytest

from ipckit.fdops import FdOps, close_fd


@pytest.fixture
def pipe_pair():
    r, w = os.pipe()
    reader, writer = FdOps(r), FdOps(w)
    yield reader, writer
    reader.close()
    writer.close()


def test_write_then_read(pipe_pair):
    reader, writer = pipe_pair
    assert writer.write(b"Hello from server!\n") == len(b"Hello from server!\n")
    assert reader.read(128) == b"Hello from server!\n"


def test_vectored_round_trip(pipe_pair):
    reader, writer = pipe_pair
    parts = [b"Bytes ", b"from ", b"client!\0"]
    total = sum(len(p) for p in parts)
    assert writer.write_vectored(parts) == total
    first, second = bytearray(6), bytearray(total - 6)
    assert reader.read_vectored([first, second]) == total
    assert bytes(first + second) == b"".join(parts)


def test_read_eof_after_writer_closed(pipe_pair):
    reader, writer = pipe_pair
    writer.close()
    assert reader.read(16) == b""


def test_fileno_matches_descriptor():
    r, w = os.pipe()
    with FdOps(r) as reader, FdOps(w) as writer:
        assert reader.fileno() == r
        assert writer.fileno() == w


def test_close_closes_descriptor():
    r, w = os.pipe()
    os.close(w)
    ops = FdOps(r)
    ops.close()
    assert ops.closed
    with pytest.raises(OSError):
        os.fstat(r)


def test_detach_keeps_descriptor_open():
    r, w = os.pipe()
    ops = FdOps(r)
    fd = ops.detach()
    ops.close()
    assert fd == r
    assert os.fstat(fd).st_size >= 0
    os.close(r)
    os.close(w)


def test_operations_after_close_raise(pipe_pair):
    reader, _ = pipe_pair
    reader.close()
    with pytest.raises(ValueError):
        reader.read(1)
    with pytest.raises(ValueError):
        reader.fileno()


def test_context_manager_closes():
    r, w = os.pipe()
    os.close(w)
    with FdOps(r) as ops:
        pass
    assert ops.closed
    with pytest.raises(OSError):
        os.fstat(r)


def test_flush_on_regular_file(tmp_path):
    path = tmp_path / "data"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT)
    with FdOps(fd) as ops:
        assert ops.write(b"abc") == 3
        ops.flush()
        assert os.fstat(ops.fileno()).st_size == 3
    assert path.read_bytes() == b"abc"


def test_close_fd_bad_descriptor():
    r, w = os.pipe()
    os.close(r)
    os.close(w)
    with pytest.raises(OSError):
        close_fd(r)