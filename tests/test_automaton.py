"""Tests for keyword automaton construction and matching."""

from __future__ import annotations

import logging
from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from trielex import KeywordAutomaton, KeywordError, KeywordState


def leaf() -> KeywordState:
    return KeywordState(is_end_state=True)


class TestConstruction:
    """Trie shape produced from keyword sets."""

    def test_arrows_and_braces(self) -> None:
        automaton = KeywordAutomaton(["->", "<-", "{", "}"])
        assert automaton.root == KeywordState(
            is_end_state=False,
            transitions={
                "{": leaf(),
                "}": leaf(),
                "-": KeywordState(transitions={">": leaf()}),
                "<": KeywordState(transitions={"-": leaf()}),
            },
        )

    def test_prefix_keyword_is_accepting_inner_node(self) -> None:
        automaton = KeywordAutomaton(["->", "-", "*"])
        assert automaton.root == KeywordState(
            transitions={
                "*": leaf(),
                "-": KeywordState(is_end_state=True, transitions={">": leaf()}),
            },
        )

    def test_to_dict(self) -> None:
        automaton = KeywordAutomaton(["ab"])
        assert automaton.root.to_dict() == {
            "is_end_state": False,
            "transitions": {
                "a": {
                    "is_end_state": False,
                    "transitions": {"b": {"is_end_state": True, "transitions": {}}},
                }
            },
        }

    def test_duplicates_are_idempotent(self) -> None:
        once = KeywordAutomaton(["->", "{"])
        twice = KeywordAutomaton(["->", "{", "->", "{"])
        assert once == twice
        assert len(twice) == 2

    def test_accepts_any_iterable(self) -> None:
        automaton = KeywordAutomaton(k for k in ("(", ")"))
        assert "(" in automaton
        assert ")" in automaton

    def test_state_count(self) -> None:
        automaton = KeywordAutomaton(["->", "<-", "{", "}"])
        # root + { + } + - + -> + < + <-
        assert automaton.state_count == 7

    def test_empty_keyword_set(self) -> None:
        automaton = KeywordAutomaton([])
        assert len(automaton) == 0
        assert automaton.state_count == 1
        assert automaton.match_from("x", 0) == (False, 0)

    def test_non_str_keyword_rejected(self) -> None:
        with pytest.raises(KeywordError) as exc_info:
            KeywordAutomaton(["->", 3])
        assert exc_info.value.keyword == 3
        assert isinstance(exc_info.value, TypeError)

    def test_empty_keyword_marks_root_and_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="trielex"):
            automaton = KeywordAutomaton(["", "+"])
        assert automaton.root.is_end_state
        assert "" in automaton
        assert any("Empty keyword" in r.message for r in caplog.records)

    def test_build_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="trielex"):
            KeywordAutomaton(["a", "ab"])
        assert any("2 keywords into 3 states" in r.getMessage() for r in caplog.records)


class TestOrderIndependence:
    """Trie union is commutative."""

    def test_all_permutations_equal(self) -> None:
        keywords = ["->", "-", "<-", "<", "{"]
        reference = KeywordAutomaton(keywords)
        for order in permutations(keywords):
            automaton = KeywordAutomaton(order)
            assert automaton == reference
            assert automaton.fingerprint() == reference.fingerprint()

    @given(
        st.lists(st.text(alphabet="-<>{}*.ab", min_size=1, max_size=4), max_size=12),
        st.randoms(use_true_random=False),
    )
    @settings(max_examples=100)
    def test_shuffled_keywords_build_equal_tries(self, keywords, rnd) -> None:
        shuffled = list(keywords)
        rnd.shuffle(shuffled)
        assert KeywordAutomaton(keywords) == KeywordAutomaton(shuffled)

    def test_different_sets_differ(self) -> None:
        first = KeywordAutomaton(["ab", "c"])
        second = KeywordAutomaton(["a", "bc"])
        assert first != second
        assert first.fingerprint() != second.fingerprint()


class TestMatchFrom:
    """Greedy, non-backtracking walk."""

    automaton = KeywordAutomaton(["->", "<-", "{", "}", "-"])

    def test_full_keyword(self) -> None:
        assert self.automaton.match_from("a->b", 1) == (True, 3)

    def test_prefix_keyword_at_end_of_input(self) -> None:
        assert self.automaton.match_from("-", 0) == (True, 1)

    def test_stops_on_non_accepting_state(self) -> None:
        assert self.automaton.match_from("<x", 0) == (False, 1)

    def test_no_transition_consumes_nothing(self) -> None:
        assert self.automaton.match_from("?", 0) == (False, 0)

    def test_position_at_end(self) -> None:
        assert self.automaton.match_from("ab", 2) == (False, 2)

    def test_no_backtrack_after_overshoot(self) -> None:
        automaton = KeywordAutomaton(["-", "-->"])
        assert automaton.match_from("--x", 0) == (False, 2)
        assert automaton.match_from("-->", 0) == (True, 3)

    def test_walk_does_not_mutate(self) -> None:
        before = self.automaton.root.to_dict()
        self.automaton.match_from("->{}<-", 0)
        assert self.automaton.root.to_dict() == before


class TestIntrospection:
    """Keyword enumeration and membership."""

    def test_keywords_sorted(self) -> None:
        automaton = KeywordAutomaton(["}", "->", "-", "<-", "{"])
        assert list(automaton.keywords()) == ["-", "->", "<-", "{", "}"]

    def test_contains(self) -> None:
        automaton = KeywordAutomaton(["->", "-"])
        assert "->" in automaton
        assert "-" in automaton
        assert ">" not in automaton
        assert "->>" not in automaton
        assert "" not in automaton
        assert 1 not in automaton

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(KeywordAutomaton(["a"]))

    def test_repr(self) -> None:
        assert repr(KeywordAutomaton(["->"])) == "KeywordAutomaton(keywords=1, states=3)"
