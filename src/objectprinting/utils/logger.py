"""Minimal logging utilities for objectprinting.

Example:
    >>> from objectprinting.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering value")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "objectprinting." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'objectprinting.mymodule'
    """
    if not (name == "objectprinting" or name.startswith("objectprinting.")):
        name = f"objectprinting.{name}"
    return logging.getLogger(name)
