"""Log routing for the ``deskdash`` logger tree.

Command output owns stdout, so log records go to stderr unless a stream is
given explicitly.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "deskdash-console"


def setup_logging(debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send ``deskdash`` logs to ``stream`` (stderr by default).

    Calling again replaces the console handler rather than stacking a second
    one, so the level and target always follow the latest call.
    """
    _logger = logging.getLogger("deskdash")
    for handler in list(_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            _logger.removeHandler(handler)

    log_level = logging.DEBUG if debug else logging.INFO
    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    _logger.setLevel(log_level)
    _logger.addHandler(console_handler)
    _logger.propagate = False
    return _logger
