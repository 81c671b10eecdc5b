"""Frame encoder and decoder.

A frame is an ordered sequence of fields, each written or read with a
:class:`~hijack.protocol.primitive.Kind`. Nothing else is put on the wire:
the kinds themselves are self-delimiting, and so is the frame.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from . import diagnostic
from .errors import DecodeFault, EndOfStreamError, ProtocolError, ShortReadError
from .primitive import Kind


def write(dst, fields: Iterable[Tuple[Kind, object]]) -> None:
    """Encode each ``(kind, value)`` pair in *fields* onto *dst*, in order.

    The first failure propagates immediately. By then *dst* may hold part
    of a frame; the stream cannot be resynchronized, so the caller must
    not retry on it.
    """

    for kind, value in fields:
        kind.encode(dst, value)


def read(src, kinds: Sequence[Kind], sink=None) -> List[object]:
    """Decode one value per entry in *kinds* from *src*, in order.

    Transport errors (:class:`OSError`) and :class:`ProtocolError`
    subclasses propagate unchanged. A :class:`ShortReadError` before any
    byte of the frame was consumed is raised as :class:`EndOfStreamError`.

    Any other exception is a fault. It is described, with its stack
    trace, to *sink*; if it was raised while an earlier transport or
    protocol error was being handled within this call, that earlier error
    is raised in its place, otherwise a :class:`DecodeFault` is raised.
    An exception the caller was already handling when it called here is
    never treated as earlier.
    """

    outer = sys.exc_info()[1]
    values = []

    try:
        for kind in kinds:
            values.append(kind.decode(src))

    except ShortReadError as error:
        if not values and error.received == 0 and not isinstance(error, EndOfStreamError):
            raise EndOfStreamError(error.expected, 0) from None
        raise

    except (OSError, ProtocolError):
        raise

    except Exception as fault:
        text = diagnostic.describe(fault)
        diagnostic.emit(sink, text)

        original = pending(fault, outer)
        if original is not None:
            raise original from None

        raise DecodeFault(text) from fault

    return values


def pending(fault: BaseException, outer: Optional[BaseException] = None):
    """Return the first transport or protocol error *fault* was raised
    while handling, or None. The search stops at *outer*, the exception
    being handled before decoding began.
    """

    seen = set()
    error = fault.__context__

    while error is not None and error is not outer and id(error) not in seen:
        if isinstance(error, (OSError, ProtocolError)):
            return error
        seen.add(id(error))
        error = error.__context__

    return None
