"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from trielex.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

import regex

# Unicode White_Space property (PropList.txt). str.isspace() is broader:
# it also accepts the information separators U+001C..U+001F.
WHITESPACE: frozenset[str] = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Opens and closes a string literal. No escapes.
QUOTE = '"'

# Unicode Alphabetic property (letters plus alphabetic marks such as
# Devanagari vowel signs and circled letters), any numeric character, or _.
WORD_RUN = regex.compile(r"[\p{Alphabetic}\p{N}_]+")


def is_word_char(char: str) -> bool:
    """Check if character belongs to an identifier/number run.

    Letters and digits from any script, plus underscore.

    """
    return WORD_RUN.fullmatch(char) is not None


def is_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace."""
    return char in WHITESPACE
