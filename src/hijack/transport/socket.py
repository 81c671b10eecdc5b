"""Transport over a connected stream socket."""

from __future__ import annotations

import socket as pysocket
from typing import Tuple

from .base import Transport


class SocketTransport(Transport):

    def __init__(self, sock: pysocket.socket):
        Transport.__init__(self)
        self.socket = sock

    def read(self, size: int) -> bytes:
        self._check()
        return self.socket.recv(size)

    def write(self, data: bytes) -> int:
        self._check()
        self.socket.sendall(data)
        return len(data)

    def close(self) -> None:
        if self.closed:
            return

        Transport.close(self)
        self.socket.close()


def connect(address: Tuple[str, int], timeout=None) -> SocketTransport:
    """Open a TCP connection to *address* and wrap it.

    A *timeout*, if given, applies to every subsequent read and write;
    expiry raises :class:`socket.timeout` from the operation in progress.
    """

    sock = pysocket.create_connection(address, timeout)
    return SocketTransport(sock)


def pair() -> Tuple[SocketTransport, SocketTransport]:
    """Return two transports connected to each other."""

    left, right = pysocket.socketpair()
    return SocketTransport(left), SocketTransport(right)
