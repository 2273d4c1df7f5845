"""Identifier/number recognizer mixin."""

from __future__ import annotations

from trielex.charsets import WORD_RUN


class WordRecognizerMixin:
    """Mixin recognizing maximal runs of letters, digits and underscores."""

    _source: str

    def _scan_word(self, pos: int) -> int:
        """Return the end of the word run starting at pos.

        Returns pos itself if the character there is not a word character.
        """
        match = WORD_RUN.match(self._source, pos)
        return match.end() if match is not None else pos
