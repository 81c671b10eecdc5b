"""
hijack Protocol Layer
=====================

This package defines the message framing used between a controlling
process and a hijacked worker process. It MUST NOT depend on any
transport implementation: everything here speaks to objects offering
``read(size)`` and ``write(data)``, nothing more.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Session (hijack.session)
    Serialized sends, per-type dispatch, readline round trips

    │
    ▼
Message Bodies (body.py)
    Meaning of each message type's body
    - call() / parse_call()
    - readline_request() / readline_response()
    - hijack()

    │
    ▼
Message API (message.py)
    Immutable envelope plus the public operations
    - send() / receive() / messages()
    - errorf() / logf()

    │
    ▼
Frame Encoder/Decoder (frame.py)
    Ordered fields as one frame
    - fail-fast writes
    - fault containment on reads

    │
    ▼
Primitive Codec (primitive.py)
    Closed set of kinds
    - Unsigned(width)
    - Tag(enumeration)
    - Text

---------------------------------------------------------------------

Wire Format
-----------

    [1 byte MessageType][8 bytes big-endian length N][N bytes body]

Frames are self-delimiting and may be pipelined back-to-back.

---------------------------------------------------------------------
"""

from . import body
from . import diagnostic
from . import errors
from . import fields
from . import frame
from . import message
from . import primitive

from .errors import (
    BodyError,
    DecodeFault,
    EndOfStreamError,
    FrameTooLargeError,
    ProtocolError,
    ShortReadError,
    UnhandledMessageError,
    UnknownTypeError,
)
from .fields import MessageType
from .message import Message, decode, encode, errorf, logf, messages, receive, send


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
