"""Defines the :class:`.Logger` class and the package's one-line logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "supernovas"
"""``str``: name of the top-level log record every helper writes to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by stdout and file handlers."""


class Logger:
    """Extended logger wraps the standard Python logging package.

    Handlers are configured from the ``logging`` section of :class:`.BehavioralConfig`, and log
    files get a standard, time-stamped file name.
    """

    def __init__(self, name=PACKAGE_LOGGER_NAME, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``, optional): name of the logger instance. Defaults to the package logger.
            level (``int``, optional): minimum level of published log messages
            path (``str``, optional): directory for the log file, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if not path:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)

        else:
            if not exists(path):
                self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                makedirs(path)

            self.filename = join(path, f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=config.MaxFileSize,
                backupCount=config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Delegate everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _supernovasLog(message: str, level: int):
    """Log a message to the top-level log record.

    This avoids pre-initializing a logger object inside the pure conversion functions.

    Args:
        message (``str``): message to record in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def supernovasLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _supernovasLog(message, level=logging.CRITICAL)


def supernovasLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _supernovasLog(message, level=logging.ERROR)


def supernovasLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _supernovasLog(message, level=logging.WARNING)


def supernovasLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _supernovasLog(message, level=logging.INFO)


def supernovasLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _supernovasLog(message, level=logging.DEBUG)
