"""Token and failure items produced by the scanner.

A scan yields a flat sequence of Token objects, optionally terminated by a
single UnrecognizedToken. Callers tell a clean end of input from a failed
scan by checking the last item (isinstance or the ``ok`` flag).

Thread Safety:
Token and UnrecognizedToken are frozen (immutable) and safe to share
across threads. TokenKind is an enum (inherently immutable).

Performance Note:
Items store raw coordinates and create SourceLocation on demand.

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from trielex.errors import UnrecognizedTokenError
from trielex.location import SourceLocation


class TokenKind(Enum):
    """Which recognizer produced a token."""

    WORD = auto()  # identifier or number: letters, digits, _
    WHITESPACE = auto()  # only yielded when skip_whitespace is off
    LITERAL = auto()  # "quoted", possibly unterminated
    KEYWORD = auto()  # accepted by the keyword automaton


@dataclass(frozen=True, slots=True)
class Token:
    """A recognized span of the input.

    Attributes:
        kind: The recognizer that matched
        value: The matched slice of the source
        start: Start offset in source
        end: End offset in source (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _end_lineno: End line number
        _end_col: End column
        _source_file: Optional source file path

    """

    ok: ClassVar[bool] = True

    kind: TokenKind
    value: str
    start: int
    end: int
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of this token."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.start,
            end_offset=self.end,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, {self._lineno}:{self._col})"


@dataclass(frozen=True, slots=True)
class UnrecognizedToken:
    """Terminal failure item: no recognizer matched.

    Attributes:
        offset: Position the scanner reached before giving up. For a
            partial keyword walk this is past the consumed prefix.
        _lineno: Line number of offset (1-indexed)
        _col: Column of offset (1-indexed)
        _source_file: Optional source file path

    """

    ok: ClassVar[bool] = False

    offset: int
    _lineno: int = 1
    _col: int = 1
    _source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the failure."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.offset,
            end_offset=self.offset,
            source_file=self._source_file,
        )

    def to_error(self) -> UnrecognizedTokenError:
        """Build the exception equivalent of this item."""
        return UnrecognizedTokenError(
            self.offset,
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

    def __repr__(self) -> str:
        return f"UnrecognizedToken({self.offset}, {self._lineno}:{self._col})"


ScanItem = Token | UnrecognizedToken
