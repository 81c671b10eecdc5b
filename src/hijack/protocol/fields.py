"""Message type constants.

Both endpoints must be built against this same enumeration; there is no
negotiation on the wire, the numeric value is the only thing transmitted.
"""

import enum


class MessageType(enum.IntEnum):
    """ One-byte discriminant selecting how the body of a frame is
        interpreted by the layers above the codec.
    """

    ERROR = 1
    LOG = 2
    CALL = 3
    HIJACK = 4
    READLINE_REQUEST = 5
    READLINE_RESPONSE = 6


ERROR = MessageType.ERROR
LOG = MessageType.LOG
CALL = MessageType.CALL
HIJACK = MessageType.HIJACK
READLINE_REQUEST = MessageType.READLINE_REQUEST
READLINE_RESPONSE = MessageType.READLINE_RESPONSE


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
