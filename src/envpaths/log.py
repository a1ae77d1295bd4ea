# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import atexit
import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from typing import Any

# Carries the per call records of the resolver, which are too noisy for DEBUG.
TRACE = 5

if logging.getLevelName(TRACE) == f"Level {TRACE}":
    logging.addLevelName(TRACE, "TRACE")

_listeners: dict[str, QueueListener] = {}


def level_from_str(string: str) -> int:
    """Converts a numeric loglevel (e.g. ``10``) or a case
    insensitive level name (e.g. ``debug``) to an int."""
    if string.isnumeric():
        return int(string, 0)

    name = string.upper()
    if name == "TRACE":
        return TRACE
    if name == "WARN":
        name = "WARNING"
    if (level := logging.getLevelNamesMapping().get(name)) is None:
        raise ValueError(f"{string} not a valid loglevel")
    return level


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _stop_listener(logger_name: str) -> None:
    if (listener := _listeners.pop(logger_name, None)) is not None:
        listener.stop()


@atexit.register
def _stop_all_listeners() -> None:
    for name in list(_listeners):
        _stop_listener(name)


def setup_logging(level: int | None = None, logger_name: str = "envpaths") -> logging.Handler:
    """Print the records of envpaths to stderr. The library itself
    never installs handlers; applications which want to see them
    call this function. Calling it again replaces the previous setup.

    :param level: The loglevel of the stderr handler. If None, the env
                  variable ``ENVPATHS_LOGLEVEL`` is read, else WARNING.
    :param logger_name: The logger which receives the handler.
    """
    if level is None:
        if (raw := os.getenv("ENVPATHS_LOGLEVEL")) is not None:
            level = level_from_str(raw)
        else:
            level = logging.WARNING

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    _stop_listener(logger_name)
    while len(logger.handlers) > 0:
        logger.handlers[0].close()
        logger.removeHandler(logger.handlers[0])

    queue: Queue[Any] = Queue()
    logger.addHandler(QueueHandler(queue))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))

    listener = QueueListener(queue, stderr_handler, respect_handler_level=True)
    listener.start()
    _listeners[logger_name] = listener
    return stderr_handler
