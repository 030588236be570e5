"""Logging setup for scripts using the engine.

Library modules only create their loggers with ``logging.getLogger(__name__)``; handlers are
attached here, to the package's root logger.
"""
import logging
import sys

LOG_NAME = "drsa_engine"
DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def setup_logger(level: int | str = logging.INFO, stream=None) -> logging.Logger:
    """Attaches a console handler to the package logger (only once) and sets its level."""
    logger = logging.getLogger(LOG_NAME)
    logger.setLevel(level)

    if not any(getattr(handler, "_drsa_engine", False) for handler in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
        handler._drsa_engine = True
        logger.addHandler(handler)

    return logger
