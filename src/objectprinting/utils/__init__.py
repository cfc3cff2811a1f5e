"""Utility modules for objectprinting.

Provides:
- logger: get_logger for logging
"""

from objectprinting.utils.logger import get_logger

__all__ = [
    "get_logger",
]
