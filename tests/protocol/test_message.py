import io
import pytest

import hijack
from hijack.protocol import message
from hijack.protocol.errors import (
    EndOfStreamError,
    FrameTooLargeError,
    ProtocolError,
    ShortReadError,
    UnknownTypeError,
)
from hijack.protocol.fields import MessageType
from hijack.protocol.message import Message


bodies = (
    b'',
    b'hello',
    'naïve ☃'.encode('utf-8'),
    bytes(range(256)),
    b'x' * 100000,
)


def test_vector_log():

    encoded = message.encode(Message(MessageType.LOG, 'hello'))
    assert encoded == bytes.fromhex('02 00 00 00 00 00 00 00 05 68 65 6c 6c 6f')


def test_vector_error_empty():

    encoded = message.encode(Message(MessageType.ERROR, ''))
    assert encoded == bytes.fromhex('01 00 00 00 00 00 00 00 00')


def test_errorf_matches_send(buffer):

    message.errorf(buffer, 'bad arg: %d', 7)
    assert buffer.getvalue() == message.encode(Message(MessageType.ERROR, 'bad arg: 7'))


def test_logf(buffer):

    message.logf(buffer, '%s=%r', 'key', 'value')
    received = message.decode(buffer.getvalue())

    assert received.type == MessageType.LOG
    assert received.text == "key='value'"


def test_formatted_without_arguments(buffer):

    message.logf(buffer, '100% done')
    assert message.decode(buffer.getvalue()).text == '100% done'


def test_formatted_escape_without_arguments(buffer):

    # No substitution happens at all, so an escaped percent stays escaped.

    message.errorf(buffer, '100%%')
    assert message.decode(buffer.getvalue()).text == '100%%'

    buffer = io.BytesIO()
    message.errorf(buffer, '%d%%', 100)
    assert message.decode(buffer.getvalue()).text == '100%'


def test_round_trip():

    for type in MessageType:
        for body in bodies:
            buffer = io.BytesIO()
            message.send(buffer, Message(type, body))
            buffer.seek(0)

            received = message.receive(buffer)
            assert received == Message(type, body)
            assert received.type is type
            assert received.body == body


def test_frame_size():

    for body in bodies:
        buffer = io.BytesIO()
        message.send(buffer, Message(MessageType.CALL, body))
        assert len(buffer.getvalue()) == 1 + 8 + len(body)

        buffer.write(b'NEXT')
        buffer.seek(0)
        message.receive(buffer)
        assert buffer.tell() == 1 + 8 + len(body)
        assert buffer.read() == b'NEXT'


def test_pipelining(buffer):

    sent = [Message(type, str(index)) for index, type in enumerate(MessageType)]
    sent.append(Message(MessageType.HIJACK, b''))

    for msg in sent:
        message.send(buffer, msg)

    buffer.seek(0)
    received = [message.receive(buffer) for msg in sent]
    assert received == sent

    with pytest.raises(EndOfStreamError):
        message.receive(buffer)


def test_messages_generator(buffer):

    sent = [Message(MessageType.LOG, 'one'), Message(MessageType.ERROR, 'two')]

    for msg in sent:
        message.send(buffer, msg)

    buffer.seek(0)
    assert list(message.messages(buffer)) == sent


def test_messages_truncated(buffer):

    message.send(buffer, Message(MessageType.LOG, 'complete'))
    message.send(buffer, Message(MessageType.LOG, 'incomplete'))

    truncated = io.BytesIO(buffer.getvalue()[:-3])
    generator = message.messages(truncated)

    assert next(generator).text == 'complete'

    with pytest.raises(ShortReadError):
        next(generator)


def test_truncation_anywhere():

    encoded = message.encode(Message(MessageType.READLINE_REQUEST, 'prompt> '))

    for cut in range(len(encoded)):
        with pytest.raises(ShortReadError):
            message.receive(io.BytesIO(encoded[:cut]))


def test_unknown_type():

    encoded = bytes((9,)) + b'\x00' * 8

    with pytest.raises(UnknownTypeError):
        message.receive(io.BytesIO(encoded))


def test_max_body(environment):

    environment.load({'HIJACK_MAX_BODY': '4'})

    assert message.decode(message.encode(Message(MessageType.LOG, 'tiny'))).text == 'tiny'

    with pytest.raises(FrameTooLargeError):
        message.decode(message.encode(Message(MessageType.LOG, 'large')))


def test_decode_trailing_bytes():

    encoded = message.encode(Message(MessageType.LOG, 'x'))

    with pytest.raises(ProtocolError):
        message.decode(encoded + b'\x00')


def test_message_immutable():

    msg = Message(2, 'text')
    assert msg.type is MessageType.LOG
    assert msg.body == b'text'

    with pytest.raises(AttributeError):
        msg.body = b'other'

    with pytest.raises(ValueError):
        Message(0, 'no such type')


def test_error_message_is_not_a_failure(buffer):

    message.errorf(buffer, 'remote failure')
    buffer.seek(0)

    received = hijack.receive(buffer)
    assert received.type is MessageType.ERROR
    assert received.text == 'remote failure'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
