"""Session layer on top of a transport.

The codec itself has no notion of concurrency: two threads writing frames
to the same channel at once would interleave their bytes. A
:class:`Session` serializes writes with a lock, and dispatches received
messages to handlers registered per message type.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

from .protocol import body
from .protocol.errors import BodyError, UnhandledMessageError
from .protocol.fields import MessageType
from .protocol.message import Message, errorf, logf, messages, receive, send


logger = logging.getLogger(__name__)

Handler = Callable[[Message], None]


class Session:
    """One endpoint of a conversation over *transport*.

    *sink* receives decode-fault diagnostics; when omitted the default
    'hijack.protocol' logger sink is used. *reader* is the function used
    by :meth:`answer` to obtain a line for a READLINE_REQUEST.
    """

    def __init__(self, transport, sink=None, reader: Callable[[str], str] = input):
        self.transport = transport
        self.sink = sink
        self.reader = reader

        self._send_lock = threading.Lock()
        self._handlers: Dict[MessageType, Handler] = {}
        self._methods: Dict[str, Callable] = {}

        self.on(MessageType.CALL, self._call)

    # --- sending ---

    def send(self, msg: Message) -> None:
        with self._send_lock:
            send(self.transport, msg)

    def errorf(self, format: str, *args) -> None:
        with self._send_lock:
            errorf(self.transport, format, *args)

    def logf(self, format: str, *args) -> None:
        with self._send_lock:
            logf(self.transport, format, *args)

    def call(self, method: str, *args) -> None:
        """Ask the peer to invoke *method*. Calls are one-way; failures on
        the far side come back, if at all, as ERROR messages.
        """

        self.send(body.call(method, *args))

    # --- receiving ---

    def receive(self) -> Message:
        return receive(self.transport, self.sink)

    def on(self, type: MessageType, handler: Optional[Handler]) -> None:
        """Register *handler* for messages of *type*; None removes it."""

        type = MessageType(type)

        if handler is None:
            self._handlers.pop(type, None)
        else:
            self._handlers[type] = handler

    def register(self, name: str, function: Callable) -> None:
        """Expose *function* to CALL messages naming *name*."""

        self._methods[name] = function

    def dispatch(self, msg: Message) -> None:
        handler = self._handlers.get(msg.type)

        if handler is not None:
            handler(msg)
        elif msg.type == MessageType.LOG:
            logger.info("peer: %s", msg.text)
        elif msg.type == MessageType.ERROR:
            logger.error("peer: %s", msg.text)
        else:
            raise UnhandledMessageError(msg)

    def serve(self) -> None:
        """Dispatch received messages until the stream ends cleanly."""

        for msg in messages(self.transport, self.sink):
            self.dispatch(msg)

    # --- interactive input ---

    def readline(self, prompt: str = "") -> str:
        """Ask the peer for a line of input, displaying *prompt*.

        Other messages arriving before the answer are dispatched as usual.
        """

        self.send(body.readline_request(prompt))

        for msg in messages(self.transport, self.sink):
            if msg.type == MessageType.READLINE_RESPONSE:
                return msg.text
            self.dispatch(msg)

        raise EOFError("stream ended while waiting for a line of input")

    def answer(self, msg: Message) -> None:
        """Handle a READLINE_REQUEST by reading a line locally."""

        try:
            line = self.reader(msg.text)
        except EOFError:
            line = ""

        self.send(body.readline_response(line))

    def _call(self, msg: Message) -> None:
        try:
            method, args = body.parse_call(msg)
        except BodyError as error:
            logger.warning("discarding malformed CALL: %s", error)
            self.errorf("malformed call: %s", error)
            return

        try:
            function = self._methods[method]
        except KeyError:
            self.errorf("unknown method: %s", method)
            return

        try:
            function(*args)
        except Exception as error:
            logger.exception("CALL %s failed", method)
            self.errorf("%s failed: %s: %s", method, type(error).__name__, error)
