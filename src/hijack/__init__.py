""" Python implementation of the hijack wire protocol: typed, length-prefixed
    frames exchanged between a controlling process and a hijacked worker
    process over any ordered, reliable byte channel.
"""

# Utility components.

from . import config
from . import json

# The codec, and the channels it runs over.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .protocol import Message, MessageType
from .protocol import send, receive, messages, errorf, logf, encode, decode
from .session import Session

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
