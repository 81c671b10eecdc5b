"""Constructors and parsers for message bodies.

The codec treats a body as opaque bytes; this module is where the
meaning of each message type's body lives.

CALL
    JSON object ``{"method": <str>, "args": [...]}``.
HIJACK
    Uninterpreted.
READLINE_REQUEST
    The prompt to display, as text.
READLINE_RESPONSE
    The line that was read, as text, without its line terminator.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from .. import json
from .errors import BodyError
from .fields import MessageType
from .message import Message


def call(method: str, *args: Any) -> Message:
    """Return a CALL message invoking *method* with positional *args*."""

    if not isinstance(method, str) or method == "":
        raise ValueError("method must be a non-empty string")

    try:
        body = json.dumps({"method": method, "args": list(args)})
    except json.EncodeError as error:
        raise ValueError(f"arguments for {method!r} cannot be encoded: {error}") from error

    return Message(MessageType.CALL, body)


def parse_call(msg: Message) -> Tuple[str, List[Any]]:
    """Return ``(method, args)`` from a CALL message."""

    _expect(msg, MessageType.CALL)

    try:
        decoded = json.loads(msg.body)
    except json.DecodeError as error:
        raise BodyError(f"CALL body is not valid JSON: {error}") from error

    if not isinstance(decoded, dict):
        raise BodyError("CALL body must be a JSON object")

    method = decoded.get("method")
    args = decoded.get("args", [])

    if not isinstance(method, str) or method == "":
        raise BodyError("CALL body has no method name")
    if not isinstance(args, list):
        raise BodyError("CALL arguments must be a list")

    return method, args


def hijack(body: bytes = b"") -> Message:
    return Message(MessageType.HIJACK, body)


def readline_request(prompt: str = "") -> Message:
    return Message(MessageType.READLINE_REQUEST, prompt)


def readline_response(answer: str) -> Message:
    return Message(MessageType.READLINE_RESPONSE, answer.rstrip("\r\n"))


def _expect(msg: Message, type: MessageType) -> None:
    if msg.type != type:
        raise BodyError(f"expected a {type.name} message, got {msg.type.name}")
