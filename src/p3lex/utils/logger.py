"""Minimal logging utilities for p3lex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from p3lex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "p3lex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'p3lex.mymodule'
    """
    # Ensure p3lex prefix for consistent namespacing
    if not (name == "p3lex" or name.startswith("p3lex.")):
        name = f"p3lex.{name}"
    return logging.getLogger(name)
