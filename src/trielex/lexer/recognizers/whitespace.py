"""Whitespace recognizer mixin."""

from __future__ import annotations

from trielex.charsets import WHITESPACE


class WhitespaceRecognizerMixin:
    """Mixin recognizing maximal runs of Unicode whitespace."""

    _source: str
    _source_len: int

    def _scan_whitespace(self, pos: int) -> int:
        """Return the end of the whitespace run starting at pos (pos if none)."""
        source = self._source
        end = pos
        while end < self._source_len and source[end] in WHITESPACE:
            end += 1
        return end
