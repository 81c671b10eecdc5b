"""Transport layer implementations."""

from .base import (
    Transport,
    TransportError,
    TransportClosedError,
    TransportTimeout,
)

from . import socket
from . import stream
from . import worker
from . import zmq

from .socket import SocketTransport
from .stream import StreamTransport
from .worker import Worker, spawn, stdio
from .zmq import ZmqTransport
