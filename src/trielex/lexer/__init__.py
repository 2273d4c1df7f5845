"""Scanner package for the Trielex tokenizer.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + position commit)
└── recognizers/         # One mixin per token rule, in priority order
    ├── word.py          # identifier / number runs
    ├── whitespace.py    # whitespace runs (discarded)
    ├── literal.py       # "quoted" literals
    └── keyword.py       # keyword automaton walk

Usage:
    >>> from trielex.automaton import KeywordAutomaton
    >>> from trielex.lexer import Scanner
    >>> for item in Scanner("f(a)", KeywordAutomaton(["(", ")"])):
    ...     print(item)
Token(WORD, 'f', 1:1)
Token(KEYWORD, '(', 1:2)
Token(WORD, 'a', 1:3)
Token(KEYWORD, ')', 1:4)

"""

from trielex.lexer.core import Scanner

__all__ = ["Scanner"]
