# suggestion_engine.py
# Frequency-ranked prefix completion over the Trie.

from __future__ import annotations
import logging
from typing import List

from .trie import Entry, Trie

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


class SuggestionEngine:
    """
    Returns completions for a typed prefix.
    Ranking: higher frequency first, ties broken alphabetically,
    so results are deterministic for a given frequency table.
    """

    def __init__(self, trie: Trie) -> None:
        self.trie = trie

    def candidates(self, prefix: str) -> List[Entry]:
        """
        Every (word, freq) under `prefix`, fully ranked.
        Collection is exhaustive; truncation happens in suggest().
        """
        if not prefix:
            return []

        node = self.trie.find_prefix_node(prefix.lower())
        if node is None:
            return []

        out = list(self.trie.entries(node))
        out.sort(key=lambda t: (-t[1], t[0]))
        return out

    def suggest(self, prefix: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """Top `limit` words starting with `prefix`, best first."""
        if limit <= 0:
            return []
        ranked = self.candidates(prefix)
        logger.debug("suggest(%r): %d candidates", prefix, len(ranked))
        return [w for w, _freq in ranked[:limit]]
