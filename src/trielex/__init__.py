"""
Trielex — Greedy keyword tokenizer for Python

Splits text into a flat stream of identifier/number runs, "quoted"
literals and keywords. Keywords are matched by a prefix trie compiled once
from the keyword set; whitespace separates tokens and is discarded.
Meaning, grammar and precedence are left to the calling parser.

Quick Start:
    >>> from trielex import Tokenizer
    >>> tokenizer = Tokenizer(["->", "<-", "{", "}"])
    >>> tokenizer.split("{inst_1 -> inst_2}")
    ['{', 'inst_1', '->', 'inst_2', '}']

Lazy scanning with failure reporting:
    >>> items = list(tokenizer.scan("{a < b}"))
    >>> items[-1]
    UnrecognizedToken(4, 1:5)
    >>> items[-1].ok
    False

Installation:
    pip install trielex              # depends only on regex
"""

from trielex.automaton import KeywordAutomaton, KeywordState
from trielex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from trielex.errors import KeywordError, TrielexError, UnrecognizedTokenError
from trielex.lexer import Scanner
from trielex.location import SourceLocation
from trielex.tokenizer import Tokenizer, tokenize
from trielex.tokens import ScanItem, Token, TokenKind, UnrecognizedToken

__version__ = "0.1.0"

__all__ = [
    "KeywordAutomaton",
    "KeywordError",
    "KeywordState",
    "ScanConfig",
    "ScanItem",
    "Scanner",
    "SourceLocation",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TrielexError",
    "UnrecognizedToken",
    "UnrecognizedTokenError",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
