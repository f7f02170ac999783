"""Minimal logging utilities for linemark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from linemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "linemark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'linemark.mymodule'
    """
    if not (name == "linemark" or name.startswith("linemark.")):
        name = f"linemark.{name}"
    return logging.getLogger(name)
