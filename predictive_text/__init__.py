"""
predictive_text

Trie-based predictive text: frequency-ranked autocomplete, bounded typo
correction, rule-based next-word hints and a flat-file frequency model.
"""

from .autocompleter import EngineStats, PredictiveText

__all__ = ["EngineStats", "PredictiveText"]

__version__ = "0.1.0"
