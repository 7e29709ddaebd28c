"""Logging configuration for the command line.

The library modules only create loggers with
``logging.getLogger(__name__)``; handlers are attached here, to the
``havarot`` package logger, when an application asks for it.

Goals
-----
- Be idempotent (safe to call multiple times).
- Work even if other parts of the application already configured logging.
- Log to stderr, and additionally to a file when one is given.
"""

from __future__ import annotations

import logging
import os
import sys
from threading import Lock
from typing import Optional, Union

PACKAGE_LOGGER = "havarot"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOCK = Lock()
_CONFIGURED = False


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_logger(level: Union[int, str] = logging.WARNING,
                     log_file: Optional[Union[str, os.PathLike]] = None,
                     force: bool = False) -> logging.Logger:
    """Configure the ``havarot`` logger and return it.

    :param level: Level name (``"DEBUG"``) or number.
    :param log_file: Optional path of a file that receives the same records.
    :param force: Replace handlers added by an earlier call.
    :return: The configured package logger.
    :raises ValueError: for an unknown level name.
    """
    global _CONFIGURED

    with _LOCK:
        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(_resolve_level(level))
        formatter = logging.Formatter(LOG_FORMAT)

        if force:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            _CONFIGURED = False

        if not _CONFIGURED:
            stream = logging.StreamHandler(sys.stderr)
            stream.setFormatter(formatter)
            logger.addHandler(stream)
            logger.propagate = False
            _CONFIGURED = True

        if log_file:
            log_path = os.path.abspath(log_file)
            has_matching_file_handler = any(
                isinstance(h, logging.FileHandler) and h.baseFilename == log_path
                for h in logger.handlers
            )
            if not has_matching_file_handler:
                fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
                fh.setFormatter(formatter)
                logger.addHandler(fh)

        return logger
