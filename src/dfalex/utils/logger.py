"""Minimal logging utilities for dfalex.

Wraps the standard library logging. The library never installs handlers;
applications (and the ``dfalex`` CLI) decide where records go.

Example:
    >>> from dfalex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("lexing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``dfalex``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'dfalex.mymodule'
    """
    if not (name == "dfalex" or name.startswith("dfalex.")):
        name = f"dfalex.{name}"
    return logging.getLogger(name)
