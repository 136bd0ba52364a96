"""An owned raw file descriptor with unbuffered I/O operations."""

from __future__ import annotations

import os
from collections.abc import Sequence

__all__ = ["FdOps", "close_fd"]


def close_fd(fd: int) -> None:
    """Close ``fd``, retrying while the call is interrupted.

    Any other failure raises OSError.
    """
    while True:
        try:
            os.close(fd)
        except InterruptedError:
            continue
        return


class FdOps:
    """Owns a file descriptor and closes it when closed or collected."""

    def __init__(self, fd: int) -> None:
        self._fd: int | None = fd

    def _require_fd(self) -> int:
        if self._fd is None:
            raise ValueError("I/O operation on closed file descriptor")
        return self._fd

    @property
    def closed(self) -> bool:
        """Whether the descriptor has been closed or detached."""
        return self._fd is None

    def read(self, size: int) -> bytes:
        """Read at most ``size`` bytes; an empty result means end of file."""
        return os.read(self._require_fd(), size)

    def read_vectored(self, buffers: Sequence[bytearray | memoryview]) -> int:
        """Read into several writable buffers in order; return the byte count."""
        return os.readv(self._require_fd(), buffers)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data``; return how many bytes were written."""
        return os.write(self._require_fd(), data)

    def write_vectored(self, buffers: Sequence[bytes | bytearray | memoryview]) -> int:
        """Write several buffers in order; return how many bytes were written."""
        return os.writev(self._require_fd(), buffers)

    def flush(self) -> None:
        """Synchronise the descriptor with its underlying storage."""
        os.fsync(self._require_fd())

    def fileno(self) -> int:
        """Return the descriptor without giving up ownership."""
        return self._require_fd()

    def detach(self) -> int:
        """Give up ownership and return the descriptor, which stays open."""
        fd = self._require_fd()
        self._fd = None
        return fd

    def close(self) -> None:
        """Close the descriptor; closing twice does nothing."""
        fd, self._fd = self._fd, None
        if fd is not None:
            close_fd(fd)

    def __enter__(self) -> FdOps:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except OSError:
            pass

    def __repr__(self) -> str:
        return f"FdOps(fd={self._fd})"