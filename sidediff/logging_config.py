"""
Logging Configuration
Sets up console logging for the sidediff command line and viewer.

Library modules only create loggers with logging.getLogger(__name__) and
log at DEBUG level; handlers are attached here, by the entry points.
"""

import logging
import os

LOGGER_NAME = "sidediff"

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = "WARNING"


def resolve_level(level: str | int | None = None) -> int:
    """
    Resolve a logging level from an argument or the LOG_LEVEL environment variable

    Args:
        level: Level name or number; None reads LOG_LEVEL (default WARNING)

    Returns:
        Numeric logging level
    """
    if isinstance(level, int):
        return level
    name = (level or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)).upper()
    return getattr(logging, name, logging.WARNING)


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Set up the package logger with a single stderr handler

    Args:
        level: Level name or number; None reads LOG_LEVEL

    Returns:
        The configured package logger
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(resolved))
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance (creates if doesn't exist)
    """
    return logging.getLogger(name)
