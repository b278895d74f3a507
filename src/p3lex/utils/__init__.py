"""Utility modules for p3lex.

Provides:
- logger: get_logger for logging
"""

from p3lex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
