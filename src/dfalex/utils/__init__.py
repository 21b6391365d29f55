"""Utility modules for dfalex.

Provides:
- logger: get_logger for namespaced logging
- stringbuilder: StringBuilder for output accumulation
"""

from dfalex.utils.logger import get_logger
from dfalex.utils.stringbuilder import StringBuilder

__all__ = [
    "StringBuilder",
    "get_logger",
]
