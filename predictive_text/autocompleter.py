# autocompleter.py
"""
PredictiveText - application facade.

Purpose:
 - Own the single Trie and the engines built on it
 - Seed a fresh engine with the common-word vocabulary
 - Simple public API for CLI/tests:
     insert(word, increment), lookup(word), suggest(prefix, limit),
     correct(word), predict_next(context), save(path), load(path), stats()
 - Learning helpers: user_selected_word(word), train_from_text(text)

Every call returns a value; empty or unknown input gives an empty or
unchanged result, and persistence failures come back as False.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .context.context_predictor import ContextPredictor
from .context.tokenizer import split_into_words
from .core.correction_engine import CorrectionEngine
from .core.suggestion_engine import DEFAULT_LIMIT, SuggestionEngine
from .core.trie import Trie
from .utils.model_store import PathLike, load_model, save_model
from .vocabulary import COMMON_WORDS

logger = logging.getLogger(__name__)

SELECTION_BOOST = 5


@dataclass(frozen=True)
class EngineStats:
    total_words: int
    total_frequency: int

    @property
    def average_frequency(self) -> float:
        if self.total_words == 0:
            return 0.0
        return self.total_frequency / self.total_words


class PredictiveText:
    """Application facade exposing a small API over one shared Trie."""

    def __init__(
        self,
        seed_common_words: bool = True,
        selection_boost: int = SELECTION_BOOST,
        seed_words: Optional[Iterable[Tuple[str, int]]] = None,
    ) -> None:
        self.trie = Trie()
        self.suggestions = SuggestionEngine(self.trie)
        self.corrections = CorrectionEngine(self.trie)
        self.context = ContextPredictor(self.trie, self.suggestions)
        self.selection_boost = selection_boost

        if seed_common_words:
            for word, freq in seed_words if seed_words is not None else COMMON_WORDS:
                self.trie.insert(word, freq)
            logger.debug("seeded vocabulary: %d words", self.trie.size())

    # Learning ---------------------------------------------------------
    def insert(self, word: str, increment: int = 1) -> None:
        self.trie.insert(word, increment)

    def user_selected_word(self, word: str) -> None:
        """Boost a word the user explicitly picked."""
        if not word:
            return
        self.trie.insert(word, self.selection_boost)
        logger.info("Learning: increased priority for '%s'", word.lower())

    def train_from_text(self, text: str) -> int:
        """Insert every word of `text` once; returns the number of words learned."""
        words = split_into_words(text)
        for w in words:
            self.trie.insert(w, 1)
        logger.info("Trained from %d words", len(words))
        return len(words)

    # Queries ---------------------------------------------------------
    def lookup(self, word: str) -> bool:
        return self.trie.lookup(word)

    def frequency(self, word: str) -> int:
        return self.trie.frequency(word)

    def suggest(self, prefix: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        return self.suggestions.suggest(prefix, limit)

    def correct(self, word: str) -> str:
        return self.corrections.correct(word)

    def predict_next(self, context: str) -> List[str]:
        return self.context.predict(context)

    def stats(self) -> EngineStats:
        total_words, total_freq = self.trie.stats()
        return EngineStats(total_words, total_freq)

    # Persistence ---------------------------------------------------------
    def save(self, path: PathLike) -> bool:
        return save_model(self.trie, path)

    def load(self, path: PathLike) -> bool:
        return load_model(self.trie, path)
