"""Minimal logging utilities for codeformat.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from codeformat.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling pattern")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "codeformat." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("blocks")
        >>> logger.name
        'codeformat.blocks'
    """
    if not (name == "codeformat" or name.startswith("codeformat.")):
        name = f"codeformat.{name}"
    return logging.getLogger(name)
