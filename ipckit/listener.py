"""Local socket servers listening for incoming connections."""

from __future__ import annotations

import socket
from collections.abc import Iterator

from .name import NameLike, to_local_socket_name
from .stream import LocalSocketStream

__all__ = ["LocalSocketListener"]


class LocalSocketListener:
    """A local socket server, listening for connections.

    Binding a filesystem name leaves a socket file behind after the listener
    is closed; deciding whether such a file can be removed is up to the caller.
    """

    def __init__(self, sock: socket.socket) -> None:
        self._sock: socket.socket | None = sock

    @classmethod
    def bind(cls, name: NameLike) -> LocalSocketListener:
        """Create a server listening at ``name``.

        Raises OSError with errno EADDRINUSE if the name is already taken.
        """
        address = to_local_socket_name(name).to_address()
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.bind(address)
            sock.listen()
        except BaseException:
            sock.close()
            raise
        return cls(sock)

    @classmethod
    def from_fd(cls, fd: int) -> LocalSocketListener:
        """Take ownership of an already listening socket descriptor."""
        return cls(socket.socket(fileno=fd))

    def _require_sock(self) -> socket.socket:
        if self._sock is None:
            raise ValueError("operation on closed local socket listener")
        return self._sock

    @property
    def closed(self) -> bool:
        """Whether the listener has been closed or detached."""
        return self._sock is None

    def accept(self) -> LocalSocketStream:
        """Wait for a client to connect and return the connection.

        In nonblocking mode raises BlockingIOError if no client is waiting.
        """
        conn, _address = self._require_sock().accept()
        return LocalSocketStream(conn)

    def incoming(self) -> Iterator[LocalSocketStream]:
        """Yield accepted connections forever; errors from accept propagate."""
        while True:
            yield self.accept()

    def set_nonblocking(self, nonblocking: bool) -> None:
        """Enable or disable nonblocking mode; it is disabled by default."""
        self._require_sock().setblocking(not nonblocking)

    def fileno(self) -> int:
        """Return the socket descriptor without giving up ownership."""
        return self._require_sock().fileno()

    def detach(self) -> int:
        """Give up ownership and return the descriptor, which stays open."""
        sock = self._require_sock()
        self._sock = None
        return sock.detach()

    def close(self) -> None:
        """Stop listening; closing twice does nothing."""
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    def __enter__(self) -> LocalSocketListener:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    def __repr__(self) -> str:
        fd = self._sock.fileno() if self._sock is not None else -1
        return f"LocalSocketListener(fd={fd})"