"""
Utility functions for thrustalloc.

Modules
-------
logging_config : Logging setup helpers
"""

from thrustalloc.utils.logging_config import get_logger, setup_logging, temporary_log_level

__all__ = [
    "get_logger",
    "setup_logging",
    "temporary_log_level",
]
