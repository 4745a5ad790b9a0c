"""Utility modules for mdexport.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for namespaced logging
"""

from mdexport.utils.hashing import hash_str
from mdexport.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
