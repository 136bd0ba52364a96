"""Local socket byte streams: the client side of a local socket connection."""

from __future__ import annotations

import errno
import io
import socket
import struct

from .name import NameLike, to_local_socket_name

__all__ = ["LocalSocketStream"]

_UCRED = struct.Struct("3i")


class LocalSocketStream(io.RawIOBase):
    """A connected local socket byte stream.

    Obtained either from a listener or by connecting to an existing local
    socket. It is an unbuffered raw stream, so it can be wrapped in
    ``io.BufferedReader`` or ``io.BufferedRWPair`` for line-based reading.
    Local sockets cannot be portably shut down, so the protocol on top of the
    stream has to negotiate the end of transmission itself.
    """

    def __init__(self, sock: socket.socket) -> None:
        super().__init__()
        self._sock: socket.socket | None = sock

    @classmethod
    def connect(cls, name: NameLike) -> LocalSocketStream:
        """Connect to the local socket server listening at ``name``.

        Raises FileNotFoundError or ConnectionRefusedError if no server is
        there, ValueError if the name contains an inner NUL byte.
        """
        address = to_local_socket_name(name).to_address()
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.connect(address)
        except BaseException:
            sock.close()
            raise
        return cls(sock)

    @classmethod
    def from_fd(cls, fd: int) -> LocalSocketStream:
        """Take ownership of an already connected socket descriptor."""
        return cls(socket.socket(fileno=fd))

    def _require_sock(self) -> socket.socket:
        if self._sock is None:
            raise ValueError("I/O operation on closed local socket stream")
        return self._sock

    def peer_pid(self) -> int:
        """Return the process identifier of the other end of the connection.

        Raises OSError where the platform cannot report peer credentials.
        """
        sock = self._require_sock()
        peercred = getattr(socket, "SO_PEERCRED", None)
        if peercred is None:
            raise OSError(errno.EOPNOTSUPP, "not supported")
        raw = sock.getsockopt(socket.SOL_SOCKET, peercred, _UCRED.size)
        pid, _uid, _gid = _UCRED.unpack(raw)
        return pid

    def set_nonblocking(self, nonblocking: bool) -> None:
        """Enable or disable nonblocking mode; it is disabled by default.

        In nonblocking mode ``readinto`` and ``write`` return None instead of
        waiting when no data is available or the send buffer is full.
        """
        self._require_sock().setblocking(not nonblocking)

    def readable(self) -> bool:
        """Local socket streams can always be read from."""
        self._require_sock()
        return True

    def writable(self) -> bool:
        """Local socket streams can always be written to."""
        self._require_sock()
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        """Receive into ``buffer``; return the byte count, 0 at end of stream.

        Returns None in nonblocking mode when no data is available.
        """
        sock = self._require_sock()
        try:
            return sock.recv_into(buffer)
        except BlockingIOError:
            return None

    def write(self, data: bytes | bytearray | memoryview) -> int | None:
        """Send ``data``; return how many bytes were sent.

        Returns None in nonblocking mode when nothing could be sent.
        """
        sock = self._require_sock()
        try:
            return sock.send(data)
        except BlockingIOError:
            return None

    def fileno(self) -> int:
        """Return the socket descriptor without giving up ownership."""
        return self._require_sock().fileno()

    def detach(self) -> int:
        """Give up ownership and return the descriptor, which stays open."""
        sock = self._require_sock()
        self._sock = None
        fd = sock.detach()
        super().close()
        return fd

    def close(self) -> None:
        """Close the connection; closing twice does nothing."""
        try:
            super().close()
        finally:
            sock, self._sock = self._sock, None
            if sock is not None:
                sock.close()

    def __repr__(self) -> str:
        fd = self._sock.fileno() if self._sock is not None else -1
        return f"LocalSocketStream(fd={fd})"