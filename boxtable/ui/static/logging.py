#!/usr/bin/env python3
# boxtable/ui/static/logging.py
from __future__ import annotations

"""
Logging setup for the boxtable console script.

Records go to stderr so rendered tables on stdout stay clean; a rotating
plain-text log file can be added from configuration.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from boxtable.ui.utils import ANSI, PRINT_MUTEX, strip_ansi

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 2

LEVEL_COLORS = {
    logging.DEBUG: ANSI["bright_black"],
    logging.WARNING: ANSI["yellow"],
    logging.ERROR: ANSI["red"],
    logging.CRITICAL: ANSI["magenta"],
}


class ColorizingStreamHandler(logging.StreamHandler):
    """Colours a record by level on a tty; anything else gets plain text."""

    @property
    def is_tty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = strip_ansi(self.format(record))
            color = LEVEL_COLORS.get(record.levelno) if self.is_tty else None
            if color:
                message = f"{color}{message}{ANSI['reset']}"
            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter for log files: escape sequences in messages are removed."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def _console_handler(logger: logging.Logger) -> ColorizingStreamHandler:
    for handler in logger.handlers:
        if isinstance(handler, ColorizingStreamHandler):
            # stderr may have been swapped since the last call (test runners do this)
            handler.setStream(sys.stderr)
            return handler
    handler = ColorizingStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(handler)
    return handler


def _file_handler(logger: logging.Logger, logfile: str) -> None:
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return
    handler = RotatingFileHandler(
        logfile, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(PlainFormatter(FILE_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)


def init_logger(
    name: str = "",
    level: Union[int, str] = logging.INFO,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Configure `name` for the console script and return it.

    Safe to call repeatedly: handlers are reused, only the level and the
    console stream are refreshed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    _console_handler(logger).setLevel(level)
    if logfile:
        _file_handler(logger, logfile)
    return logger
