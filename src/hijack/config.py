""" Process-wide settings, drawn from the environment. The environment is
    consulted once at import time; call :func:`load` again to pick up any
    changes made afterwards.

    HIJACK_MAX_BODY
        Largest body length, in bytes, that a decoder will accept. Unset,
        empty, or zero means no limit.

    HIJACK_LOG_LEVEL
        Level name applied to the 'hijack' logger by
        :func:`configure_logging`.
"""

import logging
import os


_max_body = None
_log_level = 'WARNING'


def load(environ=None):
    """ (Re)read the settings from *environ*, which defaults to
        :data:`os.environ`. A malformed value raises :class:`ValueError`.
    """

    global _max_body
    global _log_level

    if environ is None:
        environ = os.environ

    raw = environ.get('HIJACK_MAX_BODY', '').strip()

    if raw == '':
        limit = None
    else:
        try:
            limit = int(raw)
        except ValueError:
            raise ValueError('HIJACK_MAX_BODY must be an integer: ' + repr(raw))

        if limit < 0:
            raise ValueError('HIJACK_MAX_BODY cannot be negative: ' + repr(raw))
        elif limit == 0:
            limit = None

    level = environ.get('HIJACK_LOG_LEVEL', 'WARNING').strip().upper()

    if not isinstance(logging.getLevelName(level), int):
        raise ValueError('HIJACK_LOG_LEVEL is not a logging level: ' + repr(level))

    _max_body = limit
    _log_level = level


def max_body():
    """ Return the maximum accepted body length, or None if unlimited.
    """

    return _max_body


def configure_logging(level=None):
    """ Apply *level*, or the configured HIJACK_LOG_LEVEL, to the 'hijack'
        logger and return that logger.
    """

    if level is None:
        level = _log_level

    logger = logging.getLogger('hijack')
    logger.setLevel(level)
    return logger


load()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
