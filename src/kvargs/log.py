# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Console logging for kvargs.

The library only emits records: tokens at ``TRACE``, resolved
defaults and overridden values at ``DEBUG``. Nothing is printed
unless the embedding program calls :func:`setup_logging`.
"""

from __future__ import annotations

import atexit
import datetime
import logging
import os
import sys
from enum import IntEnum, unique
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from typing import Any, cast

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


@unique
class Loglevel(IntEnum):
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE

    @classmethod
    def from_name(cls, name: str) -> Loglevel:
        """Case insensitive lookup, e.g. ``debug``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"{name} not a valid loglevel") from None


_RESET = "\033[0m"
_STYLES = {
    Loglevel.TRACE: "\033[0;38;5;245m",
    Loglevel.DEBUG: "\033[0;38;5;245m",
    Loglevel.WARNING: "\033[33m",
    Loglevel.ERROR: "\033[31m",
}


class ConsoleFormatter(logging.Formatter):
    """``Jan 02 03:04:05.678 kvargs.parser: message``, optionally
    colored by level.
    """

    def __init__(self, colored: bool = False) -> None:
        super().__init__()
        self.colored = colored

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        dt = datetime.datetime.fromtimestamp(record.created)
        return dt.strftime("%b %d %H:%M:%S.%f")[:-3]

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if self.colored and (style := _STYLES.get(record.levelno)) is not None:
            msg = f"{style}{msg}{_RESET}"

        out = f"{self.formatTime(record)} {record.name}: {msg}"
        if record.exc_info:
            out += "\n" + self.formatException(record.exc_info)
        return out


class Logger(logging.Logger):
    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


logging.setLoggerClass(Logger)


def get_logger(name: str) -> Logger:
    return cast(Logger, logging.getLogger(name))


_listener: QueueListener | None = None


def _stop_listener() -> None:
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


atexit.register(_stop_listener)


def setup_logging(
    level: Loglevel | None = None,
    colored: bool | None = None,
    logger_name: str = "kvargs",
) -> None:
    """Routes the records of ``logger_name`` to stderr through a queue.
    Calling it again replaces the previous handler and its listener thread.

    :param level: Console loglevel. If None, the env variable
                  ``KVARGS_LOGLEVEL`` is read; falls back to ``INFO``.
    :param colored: If None, colors are used when stderr is a tty
                    and ``NO_COLOR`` is unset.
    """
    global _listener

    if level is None:
        raw = os.getenv("KVARGS_LOGLEVEL")
        level = Loglevel.from_name(raw) if raw is not None else Loglevel.INFO
    if colored is None:
        colored = os.getenv("NO_COLOR") is None and sys.stderr.isatty()

    logger = logging.getLogger(logger_name)
    # Filtering happens in the stderr handler.
    logger.setLevel(1)

    _stop_listener()
    while len(logger.handlers) > 0:
        logger.handlers[0].close()
        logger.removeHandler(logger.handlers[0])

    queue: Queue[Any] = Queue()
    logger.addHandler(QueueHandler(queue))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(ConsoleFormatter(colored))

    _listener = QueueListener(queue, stderr_handler, respect_handler_level=True)
    _listener.start()
