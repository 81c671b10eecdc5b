""" Diagnostic sinks for faults contained by the frame decoder. A sink is
    any callable accepting a single line of text; the codec never reaches
    for a logger on its own, a sink must be handed to it.
"""

import logging
import traceback


def logger_sink(logger):
    """ Return a sink that emits each line at ERROR level on the supplied
        :class:`logging.Logger` instance.
    """

    def sink(line):
        logger.error(line)

    return sink


def default_sink():
    """ Return a sink bound to the 'hijack.protocol' logger. This is what
        :func:`hijack.protocol.message.receive` uses when the caller does
        not provide a sink of its own.
    """

    return logger_sink(logging.getLogger('hijack.protocol'))


def describe(fault):
    """ Return the human-readable diagnostic for a contained *fault*: a
        one-line summary followed by the full stack trace, chained
        exceptions included.
    """

    trace = traceback.format_exception(type(fault), fault, fault.__traceback__)
    trace = ''.join(trace).rstrip('\n')

    summary = 'Recovered from decode fault: %s: %s' % (type(fault).__name__, fault)
    hint = 'This fault was likely caused by a decoder whose field kinds do not match what the peer encoded.'

    return '\n'.join((summary, '', 'Stack trace:', trace, '', hint))


def emit(sink, text):
    """ Deliver *text* to *sink* one line at a time. A *sink* of None
        discards the text.
    """

    if sink is None:
        return

    for line in text.split('\n'):
        sink(line)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
