"""Keyword recognizer mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trielex.automaton import KeywordAutomaton


class KeywordRecognizerMixin:
    """Mixin delegating to the keyword automaton."""

    _source: str
    _automaton: KeywordAutomaton

    def _scan_keyword(self, pos: int) -> tuple[bool, int]:
        """Walk the automaton from pos.

        Returns:
            (matched, end). A zero-width match (possible only when the
            empty string was registered) is reported as not matched so
            that every successful pull advances.
        """
        matched, end = self._automaton.match_from(self._source, pos)
        return matched and end > pos, end
