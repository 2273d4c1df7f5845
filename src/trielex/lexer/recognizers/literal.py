"""Quoted literal recognizer mixin."""

from __future__ import annotations

from trielex.charsets import QUOTE


class LiteralRecognizerMixin:
    """Mixin recognizing double-quoted string literals.

    There are no escape sequences: the literal ends at the next quote.
    An unterminated literal runs to the end of the source and still
    counts as a match.

    """

    _source: str
    _source_len: int

    def _scan_literal(self, pos: int) -> int:
        """Return the end of the literal starting at pos.

        Returns pos if the character at pos is not a quote.
        """
        if pos >= self._source_len or self._source[pos] != QUOTE:
            return pos
        close = self._source.find(QUOTE, pos + 1)
        return close + 1 if close != -1 else self._source_len
