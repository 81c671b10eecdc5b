"""ZeroMQ PAIR transport.

ZeroMQ delivers whole messages rather than a byte stream; this transport
presents the sequence of messages received on a PAIR socket as one
continuous stream, buffering whatever part of a message a read did not
consume. An empty ZeroMQ message marks the end of the stream, and is what
:meth:`ZmqTransport.close` sends to the peer.
"""

from __future__ import annotations

import itertools
from typing import Optional, Tuple

import zmq

from .base import Transport, TransportTimeout


zmq_context = zmq.Context()
_pair_ids = itertools.count()


class ZmqTransport(Transport):
    """Byte channel over a connected ``zmq.PAIR`` *socket*.

    If *timeout* is set, a read that waits longer than *timeout* seconds
    for the next message raises :class:`TransportTimeout`.
    """

    def __init__(self, socket: zmq.Socket, timeout: Optional[float] = None):
        Transport.__init__(self)
        self.socket = socket
        self.timeout = timeout
        self._buffer = b""
        self._ended = False

    def read(self, size: int) -> bytes:
        self._check()

        if not self._buffer:
            if self._ended:
                return b""

            if self.timeout is not None:
                ready = self.socket.poll(int(self.timeout * 1000), zmq.POLLIN)
                if not ready:
                    raise TransportTimeout(f"no data in {self.timeout:.2f} sec")

            self._buffer = self.socket.recv()
            if not self._buffer:
                self._ended = True
                return b""

        chunk = self._buffer[:size]
        self._buffer = self._buffer[size:]
        return chunk

    def write(self, data: bytes) -> int:
        self._check()
        data = bytes(data)
        if data:
            self.socket.send(data)
        return len(data)

    def close(self) -> None:
        if self.closed:
            return

        Transport.close(self)

        try:
            self.socket.send(b"", flags=zmq.NOBLOCK)
        except zmq.Again:
            pass
        finally:
            self.socket.close()


def bind(address: str, timeout: Optional[float] = None) -> ZmqTransport:
    socket = zmq_context.socket(zmq.PAIR)
    socket.bind(address)
    return ZmqTransport(socket, timeout)


def connect(address: str, timeout: Optional[float] = None) -> ZmqTransport:
    socket = zmq_context.socket(zmq.PAIR)
    socket.connect(address)
    return ZmqTransport(socket, timeout)


def pair(address: Optional[str] = None) -> Tuple[ZmqTransport, ZmqTransport]:
    """Return two in-process transports connected to each other."""

    if address is None:
        address = f"inproc://hijack.transport.zmq.pair:{next(_pair_ids)}"

    left = bind(address)
    right = connect(address)
    return left, right
