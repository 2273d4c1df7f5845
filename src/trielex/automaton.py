"""Keyword automaton: a prefix trie compiled once from a keyword set.

The automaton answers one question for the scanner: starting at a position
in the source, how far do the keyword transitions reach, and is the state
reached there an accepting one?

Matching is greedy and never backtracks. The walk follows transitions as
far as the input allows and succeeds only if it stops on an accepting
state. With keywords "-" and "-->", the input "--x" walks to the state for
"--", which is not accepting, so the match fails even though "-" alone
would have been a keyword.

Thread Safety:
The automaton is never mutated after construction and is safe to share
across any number of scanners and threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from trielex.errors import KeywordError
from trielex.utils.hashing import hash_keywords
from trielex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class KeywordState:
    """One node of the keyword trie.

    Attributes:
        is_end_state: True if some keyword ends at this node
        transitions: Child node for each next character

    Each node owns its children; the structure is a tree. Equality is
    structural, so two tries built from the same keywords in different
    orders compare equal.

    """

    is_end_state: bool = False
    transitions: dict[str, KeywordState] = field(default_factory=dict)

    def add_path(self, keyword: str) -> None:
        """Insert keyword below this node, marking its last node accepting."""
        state = self
        for char in keyword:
            child = state.transitions.get(char)
            if child is None:
                child = state.transitions[char] = KeywordState()
            state = child
        state.is_end_state = True

    def count_states(self) -> int:
        """Number of nodes in this subtree, including this one."""
        total = 0
        stack = [self]
        while stack:
            state = stack.pop()
            total += 1
            stack.extend(state.transitions.values())
        return total

    def to_dict(self) -> dict[str, Any]:
        """Render this subtree as nested plain dicts.

        Example:
            >>> root = KeywordState()
            >>> root.add_path("->")
            >>> root.to_dict()
            {'is_end_state': False, 'transitions': {'-': {'is_end_state': False, 'transitions': {'>': {'is_end_state': True, 'transitions': {}}}}}}
        """
        return {
            "is_end_state": self.is_end_state,
            "transitions": {
                char: child.to_dict() for char, child in self.transitions.items()
            },
        }


class KeywordAutomaton:
    """Prefix trie over a keyword set with greedy matching.

    Usage:
            >>> automaton = KeywordAutomaton(["->", "<-", "{", "}"])
            >>> automaton.match_from("a -> b", 2)
            (True, 4)
            >>> automaton.match_from("a < b", 2)
            (False, 3)

    Thread Safety:
        Immutable after construction. Safe to share across threads.

    """

    __slots__ = ("_root", "_keyword_count", "_state_count")

    def __init__(self, keywords: Iterable[str]) -> None:
        """Compile keywords into a trie.

        Args:
            keywords: Any iterable of strings. Consumed once. Duplicates
                are harmless.

        Raises:
            KeywordError: If a keyword is not a str
        """
        root = KeywordState()
        distinct: set[str] = set()
        for keyword in keywords:
            if not isinstance(keyword, str):
                raise KeywordError(keyword)
            if not keyword:
                logger.warning(
                    "Empty keyword registered; zero-width matches are "
                    "reported as unrecognized input"
                )
            root.add_path(keyword)
            distinct.add(keyword)

        self._root = root
        self._keyword_count = len(distinct)
        self._state_count = root.count_states()
        logger.debug(
            "Compiled %d keywords into %d states",
            self._keyword_count,
            self._state_count,
        )

    @property
    def root(self) -> KeywordState:
        """Initial state (the empty prefix). Treat as read-only."""
        return self._root

    @property
    def state_count(self) -> int:
        """Number of trie nodes, including the root."""
        return self._state_count

    def match_from(self, source: str, pos: int) -> tuple[bool, int]:
        """Walk the trie over source starting at pos.

        Follows transitions until the next character has none or the
        source ends. Does not backtrack to an earlier accepting state.

        Args:
            source: Text being scanned
            pos: Start position

        Returns:
            (matched, end) where matched is True iff the walk stopped on an
            accepting state, and end is the position where it stopped. end
            equals pos when nothing was consumed.
        """
        state = self._root
        source_len = len(source)
        while pos < source_len:
            next_state = state.transitions.get(source[pos])
            if next_state is None:
                break
            state = next_state
            pos += 1
        return state.is_end_state, pos

    def keywords(self) -> Iterator[str]:
        """Yield every registered keyword in sorted order."""
        stack: list[tuple[str, KeywordState]] = [("", self._root)]
        while stack:
            prefix, state = stack.pop()
            if state.is_end_state:
                yield prefix
            # Reverse so the smallest character is popped first
            for char in sorted(state.transitions, reverse=True):
                stack.append((prefix + char, state.transitions[char]))

    def fingerprint(self) -> str:
        """Order-independent digest of the keyword set.

        Two automata have the same fingerprint iff they are structurally
        equal.
        """
        return hash_keywords(self.keywords())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        state = self._root
        for char in word:
            next_state = state.transitions.get(char)
            if next_state is None:
                return False
            state = next_state
        return state.is_end_state

    def __len__(self) -> int:
        return self._keyword_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeywordAutomaton):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"KeywordAutomaton(keywords={self._keyword_count}, "
            f"states={self._state_count})"
        )
