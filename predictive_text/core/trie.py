# trie.py
# Prefix tree holding the vocabulary and its learned usage frequencies.
# Every other engine (suggestions, corrections, context, persistence)
# works on one shared Trie instance.

from __future__ import annotations
import logging
from typing import Dict, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

Word = str
Frequency = int
Entry = Tuple[Word, Frequency]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (owned exclusively by this node)
    is_word: True if the path from the root spells a stored word
    freq: accumulated usage weight, only meaningful when is_word is set
    word: the full word, stored at terminal nodes so collection
          never has to rebuild the path
    """

    __slots__ = ("children", "is_word", "freq", "word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.freq = 0
        self.word = ""


class Trie:
    """
    Trie storing words with frequency weights, used by:
     - SuggestionEngine (prefix node lookup + subtree collection)
     - CorrectionEngine (bounded search from the root)
     - ContextPredictor (membership checks)
     - model_store (save/load of every (word, freq) entry)
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, increment: int = 1) -> None:
        """
        Insert a word, or add `increment` to its frequency if present.
        Lowercases the word; stripping punctuation is the caller's job.
        """
        if not word:
            return

        lower = word.lower()
        node = self._root
        for ch in lower:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        node.is_word = True
        node.freq += increment
        node.word = lower

    # search/traversal ---------------------------------------------------------
    def find_prefix_node(self, prefix: str) -> Optional[TrieNode]:
        """Walk `prefix` from the root; None when an edge is missing."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def lookup(self, word: str) -> bool:
        """True only if the whole path exists and ends on a stored word."""
        node = self.find_prefix_node(word.lower())
        return node is not None and node.is_word

    def frequency(self, word: str) -> int:
        """Frequency of a stored word, 0 when the word is unknown."""
        node = self.find_prefix_node(word.lower())
        if node is None or not node.is_word:
            return 0
        return node.freq

    def entries(self, node: Optional[TrieNode] = None) -> Iterator[Entry]:
        """
        Yield (word, freq) for every stored word under `node` (default: root).
        Order is the natural DFS order: a node before its children,
        children in the order they were first created.
        Uses an explicit stack so long words can't hit the recursion limit.
        """
        stack = [node if node is not None else self._root]
        while stack:
            n = stack.pop()
            if n.is_word:
                yield n.word, n.freq
            # reversed so the first child is popped first
            stack.extend(reversed(list(n.children.values())))

    # convenience/debugging -----------------------------------------------------
    def stats(self) -> Tuple[int, int]:
        """(number of stored words, summed frequency). O(N) walk."""
        total_words = 0
        total_freq = 0
        for _word, freq in self.entries():
            total_words += 1
            total_freq += freq
        return total_words, total_freq

    def size(self) -> int:
        return self.stats()[0]

    def __contains__(self, word: str) -> bool:
        return self.lookup(word)

    def __len__(self) -> int:
        return self.size()
