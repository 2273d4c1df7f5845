"""Hashing utilities for Trielex.

Used to fingerprint keyword sets so that automata compiled from the same
keywords (in any order) can be recognized as equivalent.

Example:
    >>> from trielex.utils.hashing import hash_keywords
    >>> hash_keywords(["->", "{"]) == hash_keywords(["{", "->", "->"])
    True
"""

import hashlib
from collections.abc import Iterable


def hash_keywords(keywords: Iterable[str], *, truncate: int = 16) -> str:
    """Order-independent digest of a keyword set.

    Duplicates collapse. Each keyword is length-prefixed so that
    {"ab", "c"} and {"a", "bc"} never collide by concatenation.

    Args:
        keywords: Keyword strings
        truncate: Truncate result to N characters

    Returns:
        Hex digest of the sorted, deduplicated keywords
    """
    hasher = hashlib.sha256()
    for keyword in sorted(set(keywords)):
        encoded = keyword.encode("utf-8", "surrogatepass")
        hasher.update(f"{len(encoded)}:".encode("ascii"))
        hasher.update(encoded)
    return hasher.hexdigest()[:truncate]
