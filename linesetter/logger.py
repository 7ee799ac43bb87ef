"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Logging levels are used for specific purposes:

- warnings are used in ``LOGGER`` for layout problems that are resolved
  structurally but change the expected result: alignments that don't fit in
  a non-repeating context and content overflowing every available space;
- debug messages are used in ``LOGGER`` to follow line and space breaks.

Layout warnings are also collected as :class:`LayoutWarning` values by the
layouters, so that callers can inspect them without configuring logging.

"""

import contextlib
import logging
from collections import namedtuple

LOGGER = logging.getLogger('linesetter')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

#: A diagnostic collected during layout. ``kind`` is ``'alignment'`` or
#: ``'overflow'``.
LayoutWarning = namedtuple('LayoutWarning', ['kind', 'message'])


def warn(warnings, kind, message, *args):
    """Log a layout warning and append it to the ``warnings`` list."""
    LOGGER.warning(message, *args)
    warnings.append(LayoutWarning(kind, message % args if args else message))


class CallbackHandler(logging.Handler):
    """A logging handler that calls a function for every message."""
    def __init__(self, callback):
        logging.Handler.__init__(self)
        self.emit = callback


@contextlib.contextmanager
def capture_logs(logger='linesetter', level=None):
    """Return a context manager that captures all logged messages."""
    if level is None:
        level = logging.INFO
    logger = logging.getLogger(logger)
    messages = []

    def emit(record):
        if record.levelno < level:
            return
        messages.append(f'{record.levelname.upper()}: {record.getMessage()}')

    previous_handlers = logger.handlers
    previous_level = logger.level
    logger.handlers = []
    logger.addHandler(CallbackHandler(emit))
    logger.setLevel(logging.DEBUG)
    try:
        yield messages
    finally:
        logger.handlers = previous_handlers
        logger.level = previous_level
