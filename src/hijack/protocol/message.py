""" The :class:`Message` envelope and the operations that put messages on,
    and take messages off, a byte channel. Every frame on the wire is:

        [1 byte message type][8 byte big-endian length N][N bytes body]

    There is no magic number, version, or checksum; compatibility comes
    from both endpoints sharing :class:`~hijack.protocol.fields.MessageType`.
"""

import dataclasses
import io

from . import diagnostic
from . import frame
from .errors import EndOfStreamError, ProtocolError
from .fields import MessageType
from .primitive import TEXT, Tag


MESSAGE_TYPE = Tag(MessageType)

# Field order on the wire.

KINDS = (MESSAGE_TYPE, TEXT)


@dataclasses.dataclass(frozen=True)
class Message:
    """ A single unit of communication. The *body* is uninterpreted at this
        layer; its structure is defined by *type*. A str *body* is stored
        as its UTF-8 encoding.
    """

    type: MessageType
    body: bytes = b''

    def __post_init__(self):

        object.__setattr__(self, 'type', MessageType(self.type))

        body = self.body
        if isinstance(body, str):
            body = body.encode('utf-8')
        else:
            body = bytes(body)

        object.__setattr__(self, 'body', body)


    @property
    def text(self):
        """ The body decoded as UTF-8, with undecodable bytes replaced.
        """

        return self.body.decode('utf-8', errors='replace')


    def fields(self):
        return ((MESSAGE_TYPE, self.type), (TEXT, self.body))


# end of class Message



def send(dst, msg):
    """ Write *msg* to *dst* as a single frame. Any error raised while
        writing propagates; *dst* may then contain a partial frame and
        must not be reused.
    """

    frame.write(dst, msg.fields())


def receive(src, sink=None):
    """ Read one frame from *src* and return it as a new :class:`Message`.
        Faults contained by the decoder are described to *sink*, which
        defaults to :func:`hijack.protocol.diagnostic.default_sink`.
    """

    if sink is None:
        sink = diagnostic.default_sink()

    type, body = frame.read(src, KINDS, sink)
    return Message(type, body)


def messages(src, sink=None):
    """ Generator yielding each :class:`Message` from *src* until the
        stream ends cleanly between two frames. A stream that ends inside
        a frame raises :class:`~hijack.protocol.errors.ShortReadError`.
    """

    while True:
        try:
            msg = receive(src, sink)
        except EndOfStreamError:
            return

        yield msg


def errorf(dst, format, *args):
    """ Send an ERROR message whose body is *format* % *args*. This is a
        one-way advisory; nothing is expected in return.

        With no *args* the *format* string is sent verbatim, without any
        %-substitution: errorf(dst, "100%%") sends "100%%", not "100%".
    """

    _sendf(dst, MessageType.ERROR, format, args)


def logf(dst, format, *args):
    """ Send a LOG message whose body is *format* % *args*. As with
        :func:`errorf`, a *format* with no *args* is sent verbatim.
    """

    _sendf(dst, MessageType.LOG, format, args)


def _sendf(dst, type, format, args):

    if args:
        text = format % args
    else:
        text = format

    send(dst, Message(type, text))


def encode(msg):
    """ Return the bytes of the frame for *msg*.
    """

    buffer = io.BytesIO()
    send(buffer, msg)
    return buffer.getvalue()


def decode(data, sink=None):
    """ Return the :class:`Message` held in *data*, which must contain
        exactly one complete frame.
    """

    buffer = io.BytesIO(data)
    msg = receive(buffer, sink)

    trailing = len(data) - buffer.tell()
    if trailing:
        raise ProtocolError('%d trailing bytes after frame' % (trailing))

    return msg


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
