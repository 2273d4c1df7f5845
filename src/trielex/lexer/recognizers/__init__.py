"""Token recognizers for the Trielex scanner.

Each recognizer is a mixin with one pure ``_scan_*`` method that reports
where a token of its kind starting at a given position would end. None of
them move the scanner; the scanner commits the winning span.
"""

from trielex.lexer.recognizers.keyword import KeywordRecognizerMixin
from trielex.lexer.recognizers.literal import LiteralRecognizerMixin
from trielex.lexer.recognizers.whitespace import WhitespaceRecognizerMixin
from trielex.lexer.recognizers.word import WordRecognizerMixin

__all__ = [
    "KeywordRecognizerMixin",
    "LiteralRecognizerMixin",
    "WhitespaceRecognizerMixin",
    "WordRecognizerMixin",
]
