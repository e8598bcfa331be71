"""Minimal logging utilities for pgnlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pgnlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Tokenizing game file")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pgnlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("reporting").name
        'pgnlex.reporting'
    """
    if not (name == "pgnlex" or name.startswith("pgnlex.")):
        name = f"pgnlex.{name}"
    return logging.getLogger(name)
