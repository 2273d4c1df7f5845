"""Greedy token scanner.

At every position the scanner tries four recognizers in a fixed order and
the first one that matches wins:

1. word run (letters, digits, underscore)
2. whitespace run (discarded)
3. quoted literal
4. keyword automaton walk

Each recognizer only reports where its span would end; the scanner then
commits position. Every successful pull advances, so a scan is always
finite.

Thread Safety:
Scanner instances are single-use and single-consumer. Create one per
source string. The automaton they read is shared and never mutated.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trielex.config import get_scan_config
from trielex.lexer.recognizers import (
    KeywordRecognizerMixin,
    LiteralRecognizerMixin,
    WhitespaceRecognizerMixin,
    WordRecognizerMixin,
)
from trielex.tokens import ScanItem, Token, TokenKind, UnrecognizedToken
from trielex.utils.logger import get_logger

if TYPE_CHECKING:
    from trielex.automaton import KeywordAutomaton
    from trielex.config import ScanConfig

logger = get_logger(__name__)


class Scanner(
    WordRecognizerMixin,
    WhitespaceRecognizerMixin,
    LiteralRecognizerMixin,
    KeywordRecognizerMixin,
):
    """Lazy, forward-only iterator over the tokens of one source string.

    Usage:
            >>> from trielex.automaton import KeywordAutomaton
            >>> scanner = Scanner("{aaa ->bbb }", KeywordAutomaton(["->", "{", "}"]))
            >>> [item.value for item in scanner]
            ['{', 'aaa', '->', 'bbb', '}']

    If some position starts no token, the scanner yields one
    UnrecognizedToken and is exhausted from then on.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_automaton",
        "_config",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_exhausted",
    )

    def __init__(
        self,
        source: str,
        automaton: KeywordAutomaton,
        *,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Bind a scanner to source text and a compiled automaton.

        Args:
            source: Text to tokenize
            automaton: Compiled keyword automaton (shared, read-only)
            source_file: Optional source file path for locations and errors
            config: Scan configuration; defaults to the active ScanConfig
        """
        self._source = source
        self._source_len = len(source)
        self._automaton = automaton
        self._config = config if config is not None else get_scan_config()
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._exhausted = False

    @property
    def position(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    @property
    def exhausted(self) -> bool:
        """True once the scanner has reported unrecognized input."""
        return self._exhausted

    def __iter__(self) -> Scanner:
        return self

    def __next__(self) -> ScanItem:
        """Pull the next token, or the failure item.

        Raises:
            StopIteration: At end of input or after a failure was reported
            UnrecognizedTokenError: In strict mode, instead of yielding the
                failure item
        """
        skip_whitespace = self._config.skip_whitespace
        while not self._exhausted and self._pos < self._source_len:
            start = self._pos
            kind, matched, end = self._scan_token(start)
            if not matched:
                return self._fail(end)
            if kind is TokenKind.WHITESPACE and skip_whitespace:
                self._commit_to(end)
                continue
            return self._emit(kind, start, end)
        raise StopIteration

    def _scan_token(self, pos: int) -> tuple[TokenKind, bool, int]:
        """Try each recognizer in priority order at pos.

        Returns:
            (kind, matched, end). When nothing matched, kind is KEYWORD and
            end is where the keyword walk stopped.
        """
        end = self._scan_word(pos)
        if end > pos:
            return TokenKind.WORD, True, end
        end = self._scan_whitespace(pos)
        if end > pos:
            return TokenKind.WHITESPACE, True, end
        end = self._scan_literal(pos)
        if end > pos:
            return TokenKind.LITERAL, True, end
        matched, end = self._scan_keyword(pos)
        return TokenKind.KEYWORD, matched, end

    def _emit(self, kind: TokenKind, start: int, end: int) -> Token:
        lineno, col = self._lineno, self._col
        self._commit_to(end)
        return Token(
            kind=kind,
            value=self._source[start:end],
            start=start,
            end=end,
            _lineno=lineno,
            _col=col,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _fail(self, end: int) -> UnrecognizedToken:
        self._commit_to(end)
        self._exhausted = True
        failure = UnrecognizedToken(
            offset=end,
            _lineno=self._lineno,
            _col=self._col,
            _source_file=self._source_file,
        )
        logger.debug("Unrecognized input at %s", failure.location)
        if self._config.strict:
            raise failure.to_error()
        return failure

    def _commit_to(self, end: int) -> None:
        """Advance position to end, keeping line and column in step."""
        if end == self._pos:
            return
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos = end

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else f"pos={self._pos}"
        return f"Scanner({state}, len={self._source_len})"
