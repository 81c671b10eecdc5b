"""Protocol-layer exceptions.

Transport failures are not represented here: any :class:`OSError` raised
by the underlying channel propagates to the caller unchanged.
"""

from __future__ import annotations


class ProtocolError(Exception):
    """Base class for all errors raised by the framing layer."""


class ShortReadError(ProtocolError, EOFError):
    """The channel ended before a field was complete.

    *expected* and *received* count bytes for the field being decoded,
    including any length prefix.
    """

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        ProtocolError.__init__(self, f"short read: expected {expected} bytes, received {received}")


class EndOfStreamError(ShortReadError):
    """The channel ended cleanly, on a frame boundary."""


class UnknownTypeError(ProtocolError, ValueError):
    """A tag byte does not name a member of the enumeration."""

    def __init__(self, value: int):
        self.value = value
        ProtocolError.__init__(self, f"unknown message type: {value}")


class FrameTooLargeError(ProtocolError, ValueError):
    """A declared length exceeds the configured maximum."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        ProtocolError.__init__(self, f"declared length {size} exceeds limit of {limit} bytes")


class DecodeFault(ProtocolError):
    """An unexpected exception was contained at the frame boundary.

    The full diagnostic, including the stack trace of the original fault,
    is available as *diagnostic*.
    """

    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        ProtocolError.__init__(self, diagnostic)


class BodyError(ProtocolError, ValueError):
    """A message body does not have the structure its type calls for."""


class UnhandledMessageError(ProtocolError):
    """No handler is registered for a received message type."""

    def __init__(self, message):
        self.message = message
        ProtocolError.__init__(self, f"no handler for {message.type.name} message")
