import io
import os
import pytest

import hijack


@pytest.fixture
def buffer():
    return io.BytesIO()


@pytest.fixture
def lines():
    """ A diagnostic sink that simply collects what it is given.
    """

    class Sink(list):
        def __call__(self, line):
            self.append(line)

    return Sink()


@pytest.fixture
def socket_pair():

    left, right = hijack.transport.socket.pair()

    yield left, right

    left.close()
    right.close()


@pytest.fixture
def pipe_pair():
    """ A StreamTransport pair built from two operating system pipes, the
        same arrangement a worker subprocess uses.
    """

    a_read, b_write = os.pipe()
    b_read, a_write = os.pipe()

    left = hijack.transport.StreamTransport(os.fdopen(a_read, 'rb'), os.fdopen(a_write, 'wb'))
    right = hijack.transport.StreamTransport(os.fdopen(b_read, 'rb'), os.fdopen(b_write, 'wb'))

    yield left, right

    left.close()
    right.close()


@pytest.fixture
def environment():
    """ Restore the default configuration after a test reloads it.
    """

    yield hijack.config

    hijack.config.load(dict())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
