"""
Logger module for semantic_types.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('semantic_types')
logger.setLevel(logging.WARNING)  # Registry lookups are hot, keep debug output opt-in

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def set_log_level(level: int) -> None:
    """Set the logging level for the package.

    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
