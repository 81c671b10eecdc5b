"""Transport over binary file objects: pipes, subprocess pipes, buffers."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .base import Transport, TransportError


class StreamTransport(Transport):
    """Read from *reader* and write to *writer*.

    When *writer* is omitted the same object serves both directions, as
    with an :class:`io.BytesIO` or a socket's ``makefile('rwb')``. Every
    write is flushed so that a complete frame is visible to the peer
    without waiting for a buffer to fill.
    """

    def __init__(self, reader: BinaryIO, writer: Optional[BinaryIO] = None):
        Transport.__init__(self)
        self.reader = reader
        self.writer = reader if writer is None else writer

    def read(self, size: int) -> bytes:
        self._check()
        return self.reader.read(size)

    def write(self, data: bytes) -> int:
        self._check()

        view = memoryview(data)
        while view:
            written = self.writer.write(view)
            if not written:
                raise TransportError(f"{type(self).__name__} writer accepted no bytes")
            view = view[written:]

        self.writer.flush()
        return len(data)

    def flush(self) -> None:
        self._check()
        self.writer.flush()

    def close(self) -> None:
        if self.closed:
            return

        Transport.close(self)

        try:
            self.writer.close()
        finally:
            if self.reader is not self.writer:
                self.reader.close()
