"""Logging for pseudoscss.

All loggers live under the "pseudoscss" namespace. The library only emits
records; handlers are attached by the command-line entry point through
configure_logging, never at import time.

Example:
    >>> from pseudoscss.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling stylesheet")
"""

from __future__ import annotations

import logging
from typing import IO

PACKAGE_LOGGER = "pseudoscss"
LOG_FORMAT = "%(name)s: %(message)s"

# Marks handlers installed by configure_logging
_HANDLER_FLAG = "_pseudoscss_handler"


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a pseudoscss module.

    Args:
        name: Module name (``__name__``), inside the pseudoscss package

    Raises:
        ValueError: If name is outside the pseudoscss namespace
    """
    if not (name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")):
        raise ValueError(f"Logger {name!r} is outside the {PACKAGE_LOGGER} namespace")
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING, stream: IO[str] | None = None) -> logging.Handler:
    """Send pseudoscss records at or above level to stream (stderr by default).

    A handler installed by an earlier call is replaced, so repeated runs in
    one process never duplicate output. Returns the new handler.
    """
    logger = get_logger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler
