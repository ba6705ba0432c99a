"""Logging configuration for the blog engine."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = "blog",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def set_log_level(level: int | str, prefix: str = "blog") -> None:
    """Apply a level to every already-created logger under ``prefix``.

    Module loggers are created at import time with the default level, so the
    configured level has to be pushed to them once settings are known.
    """
    for name in list(logging.root.manager.loggerDict.keys()):
        if name != prefix and not name.startswith(prefix + "."):
            continue
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
