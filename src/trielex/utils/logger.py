"""Minimal logging utilities for Trielex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from trielex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling keywords")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "trielex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'trielex.mymodule'
    """
    if not (name == "trielex" or name.startswith("trielex.")):
        name = f"trielex.{name}"
    return logging.getLogger(name)
