"""
predictive_text.core

The prefix-tree engine behind the predictive text assistant.
Contains:
 - the Trie holding words and their learned frequencies (Trie, TrieNode)
 - frequency-ranked prefix completion (SuggestionEngine)
 - bounded typo correction over the Trie (CorrectionEngine)
"""

from .trie import Trie, TrieNode
from .suggestion_engine import SuggestionEngine
from .correction_engine import CorrectionEngine

__all__ = [
    "Trie",
    "TrieNode",
    "SuggestionEngine",
    "CorrectionEngine",
]
