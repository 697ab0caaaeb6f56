"""Minimal logging utilities for Pepino.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pepino.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Switched dialect to %s", "fr")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pepino." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pepino.mymodule'
    """
    if not (name == "pepino" or name.startswith("pepino.")):
        name = f"pepino.{name}"
    return logging.getLogger(name)
