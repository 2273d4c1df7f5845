"""Utility modules for Trielex.

Provides:
- hashing: hash_keywords for keyword-set fingerprinting
- logger: get_logger for logging
"""

from trielex.utils.hashing import hash_keywords
from trielex.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_keywords",
]
