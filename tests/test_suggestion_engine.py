# tests/test_suggestion_engine.py
import pytest
from predictive_text.core.trie import Trie
from predictive_text.core.suggestion_engine import SuggestionEngine


def make(words):
    trie = Trie()
    for w, f in words:
        trie.insert(w, f)
    return SuggestionEngine(trie)


def test_frequency_descending():
    eng = make([("can", 20), ("cat", 10), ("car", 5)])
    assert eng.suggest("ca", 3) == ["can", "cat", "car"]


def test_ties_break_alphabetically():
    eng = make([("cat", 10), ("cap", 10)])
    assert eng.suggest("ca", 2) == ["cap", "cat"]


def test_limit_truncates():
    eng = make([(f"w{i}", i) for i in range(20)])
    assert len(eng.suggest("w", 4)) == 4
    assert eng.suggest("w", 4) == ["w19", "w18", "w17", "w16"]
    assert eng.suggest("w", 0) == []


def test_default_limit_is_five():
    eng = make([(f"a{i}", 1) for i in range(10)])
    assert len(eng.suggest("a")) == 5


def test_prefix_word_itself_included():
    eng = make([("the", 100), ("that", 50), ("this", 20)])
    assert eng.suggest("th", 5) == ["the", "that", "this"]
    assert eng.suggest("the", 5) == ["the"]


def test_unknown_or_empty_prefix():
    eng = make([("cat", 1)])
    assert eng.suggest("", 5) == []
    assert eng.suggest("dog", 5) == []


def test_prefix_case_insensitive():
    eng = make([("cat", 1)])
    assert eng.suggest("CA") == ["cat"]


def test_collection_is_exhaustive():
    # the best word sits deep in the subtree, not among the first visited
    eng = make([("ab", 1), ("abc", 1), ("abd", 1), ("azzzzz", 99)])
    assert eng.suggest("a", 1) == ["azzzzz"]
    assert eng.candidates("a")[0] == ("azzzzz", 99)
