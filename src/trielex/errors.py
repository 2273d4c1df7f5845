"""Exception classes for Trielex.

The lazy token stream reports unrecognized input as its final item rather
than raising. These exceptions cover construction errors and the eager
or strict paths that convert that final item into an exception.
"""

from __future__ import annotations


class TrielexError(Exception):
    """Base exception for all Trielex errors.

    Subclass this for specific error categories.
    """

    pass


class KeywordError(TrielexError, TypeError):
    """Invalid keyword supplied to the keyword automaton.

    Raised when a keyword is not a string.
    """

    def __init__(self, keyword: object) -> None:
        """Initialize keyword error.

        Args:
            keyword: The offending value
        """
        self.keyword = keyword
        super().__init__(
            f"keywords must be str, got {type(keyword).__name__}: {keyword!r}"
        )


class UnrecognizedTokenError(TrielexError):
    """No recognizer matched at a position in the input.

    Raised by Tokenizer.split() and by scanners running under a strict
    ScanConfig. The lazy stream reports the same condition as an
    UnrecognizedToken item instead.
    """

    def __init__(
        self,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize with the failure position.

        Args:
            offset: Character offset in the source where scanning stopped
            lineno: Line number of the offset (1-indexed)
            col_offset: Column of the offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}unrecognized input at offset {offset}")
