"""Tests for the public Tokenizer API."""

from __future__ import annotations

import pytest

from trielex import (
    KeywordAutomaton,
    Scanner,
    Token,
    Tokenizer,
    TokenKind,
    UnrecognizedToken,
    UnrecognizedTokenError,
    tokenize,
)


class TestTokenizer:
    """Build once, scan many."""

    def test_scan_returns_scanner(self) -> None:
        tokenizer = Tokenizer(["->"])
        assert isinstance(tokenizer.scan("a"), Scanner)

    def test_automaton_reused_across_scans(self) -> None:
        tokenizer = Tokenizer(["->", "{", "}"])
        automaton = tokenizer.automaton
        assert isinstance(automaton, KeywordAutomaton)
        assert tokenizer.split("{a}") == ["{", "a", "}"]
        assert tokenizer.split("b -> c") == ["b", "->", "c"]
        assert tokenizer.automaton is automaton

    def test_independent_scanners(self) -> None:
        tokenizer = Tokenizer(["+"])
        first = tokenizer.scan("a + b")
        second = tokenizer.scan("c")
        assert next(first).value == "a"
        assert next(second).value == "c"
        assert next(first).value == "+"

    def test_public_properties_documented(self) -> None:
        assert Tokenizer.automaton.__doc__
        assert KeywordAutomaton.root.__doc__
        assert KeywordAutomaton.state_count.__doc__

    def test_split_raises_on_failure(self) -> None:
        tokenizer = Tokenizer(["->"])
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            tokenizer.split("a\nb <- c", source_file="graph.txt")
        err = exc_info.value
        assert err.offset == 4
        assert err.lineno == 2
        assert err.col_offset == 3
        assert str(err) == "graph.txt:2:3 unrecognized input at offset 4"

    def test_split_empty(self) -> None:
        assert Tokenizer([]).split("") == []

    def test_repr(self) -> None:
        assert repr(Tokenizer(["->"])) == "Tokenizer(KeywordAutomaton(keywords=1, states=3))"


class TestTokenizeFunction:
    """Per-call convenience wrapper."""

    def test_matches_tokenizer(self) -> None:
        keywords = ["->", "<-", "{", "}"]
        source = "{inst1 -> inst2 -> {inst4 < inst3}"
        assert list(tokenize(source, keywords)) == list(Tokenizer(keywords).scan(source))

    def test_accepts_generator(self) -> None:
        items = list(tokenize("a.b", (k for k in ["."])))
        assert [t.value for t in items] == ["a", ".", "b"]


class TestItems:
    """Token and failure items."""

    def test_token_fields(self) -> None:
        token = next(Tokenizer(["->"]).scan("  ->"))
        assert isinstance(token, Token)
        assert token.ok is True
        assert token.kind is TokenKind.KEYWORD
        assert token.value == "->"
        assert (token.start, token.end) == (2, 4)

    def test_token_is_frozen(self) -> None:
        token = next(Tokenizer([]).scan("a"))
        with pytest.raises(AttributeError):
            token.value = "b"  # type: ignore[misc]

    def test_failure_fields(self) -> None:
        failure = list(Tokenizer([]).scan("a ?"))[-1]
        assert isinstance(failure, UnrecognizedToken)
        assert failure.ok is False
        assert failure.offset == 2

    def test_repr(self) -> None:
        items = list(Tokenizer(["{"]).scan("{x ?"))
        assert repr(items[0]) == "Token(KEYWORD, '{', 1:1)"
        assert repr(items[-1]) == "UnrecognizedToken(3, 1:4)"
