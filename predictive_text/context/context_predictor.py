# context_predictor.py
# Rule-based next-word hints driven by the last word of the context.
# Not a language model: the last token is classified (pronoun / article /
# other) and each class maps to a fixed way of picking candidates from
# the Trie.
# ---------------------------------------------------------------------

from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Tuple

from ..core.suggestion_engine import SuggestionEngine
from ..core.trie import Trie
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)

MAX_PREDICTIONS = 6
PER_STARTER = 2


class ContextKind(Enum):
    PRONOUN = "pronoun"
    ARTICLE = "article"
    OTHER = "other"


_KIND_BY_WORD: Dict[str, ContextKind] = {
    **{w: ContextKind.PRONOUN for w in ("i", "you", "we", "they")},
    **{w: ContextKind.ARTICLE for w in ("the", "a", "an")},
}

# verbs that commonly follow a personal pronoun, kept in this order
PRONOUN_VERBS: Tuple[str, ...] = ("am", "are", "will", "can", "have", "want", "need")

# first letters of common nouns (after an article) and of common words
ARTICLE_STARTERS: Tuple[str, ...] = ("c", "b", "f", "m", "p", "s", "w", "h")
GENERAL_STARTERS: Tuple[str, ...] = ("t", "a", "i", "o", "h", "w")


def classify(token: str) -> ContextKind:
    """Class of a (normalized) context word; exact match only."""
    return _KIND_BY_WORD.get(token.lower(), ContextKind.OTHER)


class ContextPredictor:
    """
    Predicts up to MAX_PREDICTIONS next words for a context string.
    - pronoun: the fixed verb list, filtered to verbs the Trie knows
    - article: top PER_STARTER suggestions for each ARTICLE_STARTERS letter
    - other: same, over GENERAL_STARTERS
    Results are de-duplicated and returned in alphabetical order.
    """

    def __init__(self, trie: Trie, suggestions: SuggestionEngine) -> None:
        self.trie = trie
        self.suggestions = suggestions

    def predict(self, context: str) -> List[str]:
        words = split_into_words(context)
        if not words:
            return []

        kind = classify(words[-1])
        if kind is ContextKind.PRONOUN:
            preds = [v for v in PRONOUN_VERBS if self.trie.lookup(v)]
        elif kind is ContextKind.ARTICLE:
            preds = self._from_starters(ARTICLE_STARTERS)
        else:
            preds = self._from_starters(GENERAL_STARTERS)

        out = sorted(set(preds))[:MAX_PREDICTIONS]
        logger.debug("predict(%r): %s -> %s", context, kind.value, out)
        return out

    def _from_starters(self, starters: Tuple[str, ...]) -> List[str]:
        preds: List[str] = []
        for letter in starters:
            preds.extend(self.suggestions.suggest(letter, PER_STARTER))
        return preds
