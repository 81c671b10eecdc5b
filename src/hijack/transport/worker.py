''' Routines for the two ends of a hijacked worker process. The controlling
    process calls :func:`spawn` to start the worker with its standard input
    and output attached to pipes; the worker calls :func:`stdio` to obtain
    the matching transport over its own standard streams.
'''

import subprocess
import sys

from .stream import StreamTransport


class Worker:
    ''' A running worker subprocess and the :class:`StreamTransport` used to
        exchange frames with it. The transport reads from the worker's
        standard output and writes to its standard input.
    '''

    def __init__(self, process):

        self.process = process
        self.transport = StreamTransport(process.stdout, process.stdin)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    @property
    def pid(self):
        return self.process.pid


    def close(self, timeout=None):
        ''' Close both pipes, which the worker sees as the end of its input
            stream, and wait for it to exit. The exit status is returned;
            :class:`subprocess.TimeoutExpired` is raised if the worker is
            still running after *timeout* seconds.
        '''

        self.transport.close()
        return self.process.wait(timeout)


    def kill(self):
        self.process.kill()
        self.transport.close()
        return self.process.wait()


# end of class Worker



def spawn(arguments, **kwargs):
    ''' Start the worker described by the *arguments* list, as would be
        passed to :class:`subprocess.Popen`. Any additional keyword arguments
        are passed through, except for stdin and stdout, which are always
        pipes.
    '''

    pipe = subprocess.PIPE
    process = subprocess.Popen(arguments, stdin=pipe, stdout=pipe, **kwargs)

    return Worker(process)



def stdio(redirect=True):
    ''' Return a :class:`StreamTransport` over this process's standard input
        and output. With *redirect* set, :data:`sys.stdout` is pointed at
        :data:`sys.stderr` afterwards, so that a stray print() cannot land
        in the middle of a frame.
    '''

    transport = StreamTransport(sys.stdin.buffer, sys.stdout.buffer)

    if redirect:
        sys.stdout = sys.stderr

    return transport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
