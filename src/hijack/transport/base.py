"""Transport interface.

This is the (small) contract that byte channels should follow. It lives
outside :mod:`hijack.protocol` so the protocol remains transport-agnostic;
the codec only ever calls :meth:`Transport.read` and :meth:`Transport.write`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Transport exceptions. These derive from OSError so that callers see them
# the same way they see failures raised by the underlying channel.

class TransportError(OSError):
    """Base class for all transport-layer errors."""


class TransportClosedError(TransportError):
    """The transport was used after it was closed."""


class TransportTimeout(TransportError):
    """No data arrived within the transport's deadline."""


class Transport(ABC):
    """Minimal contract for an ordered, reliable, duplex byte channel."""

    def __init__(self):
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Return up to *size* bytes; ``b""`` means the channel has ended."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write all of *data* and return its length."""

    def flush(self) -> None:
        """Push any buffered output to the peer."""

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _check(self) -> None:
        if self._closed:
            raise TransportClosedError(f"{type(self).__name__} is closed")
