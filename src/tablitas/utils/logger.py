"""Logging for the tablitas package and its command line.

Library modules log under the ``tablitas`` namespace and never install
handlers. The command line calls configure_logging() once to route that
namespace to stderr; debug output then traces encoding resolution,
table labels and range scans.

Example:
    >>> from tablitas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling byte table")
"""

from __future__ import annotations

import logging
from typing import TextIO

_ROOT = "tablitas"
_FORMAT = "%(name)s: %(message)s"

# Handler installed by configure_logging(), replaced on reconfiguration
_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return the ``tablitas.``-prefixed logger for a module name.

    Example:
        >>> get_logger("ranges").name
        'tablitas.ranges'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Send tablitas log records to ``stream`` (stderr by default).

    Only the ``tablitas`` logger is touched, so embedding applications keep
    their own root configuration. Calling again replaces the handler
    installed by the previous call.

    Args:
        verbose: Log at DEBUG instead of WARNING
        stream: Destination stream

    Returns:
        The installed handler
    """
    global _handler

    logger = logging.getLogger(_ROOT)
    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _handler = handler
    return handler
