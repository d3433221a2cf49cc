"""
Logging configuration for thrustalloc.

The library only creates module loggers (``logging.getLogger(__name__)``) and
never installs handlers on import. Applications and scripts call
:func:`setup_logging` to get readable output, for example to see the clamp
warnings emitted by ``Thruster`` setters.

Usage:
    from thrustalloc.utils import setup_logging

    logger = setup_logging("thrustalloc", level=logging.DEBUG)

    with temporary_log_level("thrustalloc.components", logging.ERROR):
        thruster.set_current_status(raw_score)  # clamp warning suppressed
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SIMPLE_FORMAT = "%(asctime)s, %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    name: str = "thrustalloc",
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    simple_format: bool = False,
) -> logging.Logger:
    """
    Set up standardized logging.

    Args:
        name: Logger name, ``"thrustalloc"`` covers the whole package
        level: Logging level
        log_file: Log file path (None for no file logging)
        console: Enable output on stderr
        simple_format: Use simplified format (timestamp only, no level/name)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=SIMPLE_FORMAT if simple_format else DEFAULT_FORMAT,
        datefmt=DATE_FORMAT,
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger, optionally overriding its level.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


@contextmanager
def temporary_log_level(logger_name: str, level: int):
    """
    Context manager for temporarily changing a logger's level.

    Args:
        logger_name: Name of logger to modify
        level: Temporary log level
    """
    logger = logging.getLogger(logger_name)
    original_level = logger.level
    try:
        logger.setLevel(level)
        yield logger
    finally:
        logger.setLevel(original_level)
