"""Tokenizer facade: compile keywords once, scan many inputs.

Usage:
    >>> tokenizer = Tokenizer(["->", "<-", "{", "}"])
    >>> tokenizer.split("{aaa ->bbb }")
    ['{', 'aaa', '->', 'bbb', '}']

    >>> # Per-call convenience; rebuilds the automaton every time
    >>> [t.value for t in tokenize("a <- b", ["<-"])]
    ['a', '<-', 'b']

Thread Safety:
    A Tokenizer holds only its immutable automaton. Safe to share across
    threads; each scan() call returns an independent Scanner.

"""

from __future__ import annotations

from collections.abc import Iterable

from trielex.automaton import KeywordAutomaton
from trielex.lexer import Scanner
from trielex.tokens import UnrecognizedToken


class Tokenizer:
    """Greedy tokenizer over a fixed keyword set."""

    __slots__ = ("_automaton",)

    def __init__(self, keywords: Iterable[str]) -> None:
        """Compile the keyword set.

        Args:
            keywords: Any iterable of keyword strings. Consumed once.

        Raises:
            KeywordError: If a keyword is not a str
        """
        self._automaton = KeywordAutomaton(keywords)

    @property
    def automaton(self) -> KeywordAutomaton:
        """The compiled keyword automaton shared by every scan."""
        return self._automaton

    def scan(self, source: str, *, source_file: str | None = None) -> Scanner:
        """Return a lazy scanner over source.

        Args:
            source: Text to tokenize
            source_file: Optional source file path for locations and errors

        Returns:
            Scanner yielding Token items, possibly ending in one
            UnrecognizedToken
        """
        return Scanner(source, self._automaton, source_file=source_file)

    def split(self, source: str, *, source_file: str | None = None) -> list[str]:
        """Tokenize source eagerly into token values.

        Raises:
            UnrecognizedTokenError: If some position starts no token
        """
        values: list[str] = []
        for item in self.scan(source, source_file=source_file):
            if isinstance(item, UnrecognizedToken):
                raise item.to_error()
            values.append(item.value)
        return values

    def __repr__(self) -> str:
        return f"Tokenizer({self._automaton!r})"


def tokenize(
    source: str,
    keywords: Iterable[str],
    *,
    source_file: str | None = None,
) -> Scanner:
    """Scan source with a freshly compiled keyword set.

    Prefer Tokenizer when scanning more than one input with the same
    keywords.
    """
    return Scanner(source, KeywordAutomaton(keywords), source_file=source_file)
