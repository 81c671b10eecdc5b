"""Primitive codec.

Each encodable kind is a :class:`Kind` instance with an explicit
``encode(dst, value)`` and ``decode(src)`` pair. The set of kinds is
closed: supporting a new kind of value means writing a new subclass, not
teaching an existing one about more Python types.

All integers are big-endian. Text is an eight byte unsigned length ``N``
followed by exactly ``N`` raw bytes, with no terminator and no escaping.

A *dst* is anything with a ``write(bytes)`` method and a *src* anything
with a ``read(size)`` method that returns fewer bytes only at end of
stream, or when the channel has nothing more to offer right away.
"""

from __future__ import annotations

import enum
import errno
import struct
from typing import Optional, Type, Union

from .. import config
from .errors import FrameTooLargeError, ShortReadError, UnknownTypeError


def read_exactly(src, size: int) -> bytes:
    """Read *size* bytes from *src*, raising :class:`ShortReadError` if
    the stream ends first.
    """

    chunks = []
    remaining = size

    while remaining > 0:
        chunk = src.read(remaining)
        if not chunk:
            raise ShortReadError(size, size - remaining)
        chunks.append(chunk)
        remaining -= len(chunk)

    return b"".join(chunks)


def write_all(dst, data: bytes) -> None:
    """Write *data* to *dst*, repeating on short writes.

    A write that accepts no bytes at all, as a non-blocking raw stream
    reports with None or zero, raises :class:`BlockingIOError`; the
    *characters_written* attribute counts what did reach *dst*.
    """

    view = memoryview(data)
    total = 0

    while view:
        written = dst.write(view)
        if not written:
            raise BlockingIOError(errno.EAGAIN, "write accepted no bytes", total)
        total += written
        view = view[written:]


class Kind:
    """Base class for the encodable kinds."""

    def encode(self, dst, value) -> None:
        write_all(dst, self.pack(value))

    def pack(self, value) -> bytes:
        raise NotImplementedError("must be implemented by the subclass")

    def decode(self, src):
        raise NotImplementedError("must be implemented by the subclass")


class Unsigned(Kind):
    """Fixed-width unsigned integer."""

    formats = {1: "B", 2: "H", 4: "I", 8: "Q"}

    def __init__(self, width: int):
        if width not in self.formats:
            raise ValueError(f"unsupported integer width: {width}")

        self.width = width
        self.maximum = (1 << (8 * width)) - 1
        self.struct = struct.Struct(">" + self.formats[width])

    def __repr__(self):
        return f"Unsigned({self.width})"

    def pack(self, value: int) -> bytes:
        if value < 0 or value > self.maximum:
            raise ValueError(f"{value} does not fit in {self.width} unsigned bytes")
        return self.struct.pack(value)

    def decode(self, src) -> int:
        raw = read_exactly(src, self.width)
        return self.struct.unpack(raw)[0]


UINT8 = Unsigned(1)
UINT16 = Unsigned(2)
UINT32 = Unsigned(4)
UINT64 = Unsigned(8)


class Tag(Kind):
    """One-byte enumeration member."""

    def __init__(self, enumeration: Type[enum.IntEnum]):
        self.enumeration = enumeration

    def __repr__(self):
        return f"Tag({self.enumeration.__name__})"

    def pack(self, value) -> bytes:
        member = self.enumeration(value)
        return UINT8.pack(int(member))

    def decode(self, src) -> enum.IntEnum:
        number = UINT8.decode(src)

        try:
            return self.enumeration(number)
        except ValueError:
            raise UnknownTypeError(number) from None


class Text(Kind):
    """Length-prefixed byte string.

    Values may be passed as ``str``, which is encoded as UTF-8; decoding
    always returns ``bytes``. A *limit* of None defers to
    :func:`hijack.config.max_body` at decode time.
    """

    prefix = UINT64

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit

    def __repr__(self):
        return "Text()"

    def pack(self, value: Union[bytes, str]) -> bytes:
        if isinstance(value, str):
            value = value.encode("utf-8")
        else:
            value = bytes(value)
        return self.prefix.pack(len(value)) + value

    def decode(self, src) -> bytes:
        size = self.prefix.decode(src)

        limit = self.limit
        if limit is None:
            limit = config.max_body()
        if limit is not None and size > limit:
            raise FrameTooLargeError(size, limit)

        try:
            return read_exactly(src, size)
        except ShortReadError as error:
            width = self.prefix.width
            raise ShortReadError(error.expected + width, error.received + width) from None


TEXT = Text()
