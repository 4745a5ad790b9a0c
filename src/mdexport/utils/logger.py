"""Logging helpers for mdexport.

The library never configures handlers; it only creates namespaced loggers
so applications can route ``mdexport.*`` records as they see fit.

Example:
    >>> from mdexport.utils.logger import get_logger
    >>> get_logger("parser").name
    'mdexport.parser'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``mdexport.`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "mdexport" or name.startswith("mdexport.")):
        name = f"mdexport.{name}"
    return logging.getLogger(name)
