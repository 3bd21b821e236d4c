# correction_engine.py
"""
CorrectionEngine - typo correction by bounded exploration of the Trie.

Unlike the BK-tree / Levenshtein approach, the search walks the Trie from
the root and charges an edit cost as it goes:
 - insertion: the candidate has an extra character here (cost + 1)
 - match: the candidate's character equals the target's character at the
   same position (cost unchanged)
 - substitution: the characters differ (cost + 1)

A branch is abandoned once its cost exceeds MAX_EDIT_COST. Each stored word
reached within the cap is scored `freq - cost * EDIT_PENALTY`, so a popular
word two edits away can beat a rare word one edit away.

Known limits:
 - there is no deletion step, so a candidate can never "skip" a target
   character; alignment is always by position in the candidate.
 - target characters past the end of a candidate are not charged, so a
   stored prefix of the typed word is a zero-cost match.
 - equal scores keep the first candidate found in traversal order
   (children in creation order), which is deterministic for a given
   insertion history but not alphabetical.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from .trie import Trie, TrieNode

logger = logging.getLogger(__name__)

MAX_EDIT_COST = 2
EDIT_PENALTY = 10

# (word, adjusted score)
Scored = Tuple[str, int]


class CorrectionEngine:
    def __init__(self, trie: Trie, max_cost: int = MAX_EDIT_COST) -> None:
        self.trie = trie
        self.max_cost = max_cost

    def candidates(self, word: str) -> List[Scored]:
        """
        All (word, score) pairs reached within the cost cap, in traversal
        order. A word reachable along several edit paths appears once
        per path.
        """
        target = word.lower()
        if not target:
            return []

        found: List[Scored] = []
        # explicit stack of (node, depth, cost); depth == len(path built so far)
        stack: List[Tuple[TrieNode, int, int]] = [(self.trie.root, 0, 0)]
        while stack:
            node, depth, cost = stack.pop()
            if node.is_word:
                found.append((node.word, node.freq - cost * EDIT_PENALTY))

            moves: List[Tuple[TrieNode, int, int]] = []
            for ch, child in node.children.items():
                # insertion
                moves.append((child, depth + 1, cost + 1))
                if depth < len(target) and target[depth] == ch:
                    moves.append((child, depth + 1, cost))
                # a substitution lands on the same child at the same cost as
                # the insertion above, so it would only repeat that subtree

            stack.extend(m for m in reversed(moves) if m[2] <= self.max_cost)
        return found

    def correct(self, word: str) -> str:
        """
        Best correction for `word`, or `word` itself when it is already
        stored, empty, or nothing lies within the cost cap.
        """
        if not word or self.trie.lookup(word):
            return word

        best: Optional[Scored] = None
        for cand in self.candidates(word):
            if best is None or cand[1] > best[1]:
                best = cand

        if best is None:
            logger.debug("correct(%r): no candidate within cost %d", word, self.max_cost)
            return word

        logger.debug("correct(%r) -> %r (score %d)", word, best[0], best[1])
        return best[0]
