# tests/test_trie.py
import pytest
from predictive_text.core.trie import Trie


@pytest.fixture
def trie():
    return Trie()


def test_insert_accumulates_frequency(trie):
    trie.insert("hello", 3)
    trie.insert("hello", 4)
    assert trie.frequency("hello") == 7
    assert trie.size() == 1


def test_insert_lowercases(trie):
    trie.insert("HeLLo")
    assert trie.lookup("hello")
    assert trie.lookup("HELLO")
    assert list(trie.entries()) == [("hello", 1)]


def test_insert_empty_is_noop(trie):
    trie.insert("")
    assert trie.size() == 0
    assert not trie.root.children


def test_lookup_prefix_is_not_a_word(trie):
    trie.insert("there")
    assert trie.lookup("there")
    assert not trie.lookup("the")
    assert not trie.lookup("therefore")
    assert "there" in trie
    assert "th" not in trie


def test_find_prefix_node(trie):
    trie.insert("car", 2)
    node = trie.find_prefix_node("ca")
    assert node is not None and not node.is_word
    assert trie.find_prefix_node("car").word == "car"
    assert trie.find_prefix_node("cx") is None
    assert trie.find_prefix_node("") is trie.root


def test_root_never_terminal(trie):
    trie.insert("a")
    assert not trie.root.is_word
    assert not trie.lookup("")


def test_entries_dfs_order(trie):
    for w in ("b", "a", "ab"):
        trie.insert(w)
    # node before children, children in creation order
    assert [w for w, _ in trie.entries()] == ["b", "a", "ab"]


def test_terminal_word_matches_path(trie):
    for w in ("tree", "trie", "try", "t"):
        trie.insert(w)
    for word, _ in trie.entries():
        node = trie.find_prefix_node(word)
        assert node.is_word and node.word == word


def test_stats(trie):
    assert trie.stats() == (0, 0)
    trie.insert("a", 2)
    trie.insert("ab", 5)
    trie.insert("b")
    assert trie.stats() == (3, 8)
    assert len(trie) == 3


def test_deep_word_does_not_recurse(trie):
    long_word = "x" * 5000
    trie.insert(long_word)
    assert trie.lookup(long_word)
    assert trie.stats() == (1, 1)
