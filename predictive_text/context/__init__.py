# predictive_text/context/__init__.py
# next-word prediction from a short context string

from .context_predictor import ContextKind, ContextPredictor, classify
from .tokenizer import split_into_words

__all__ = [
    "ContextKind",
    "ContextPredictor",
    "classify",
    "split_into_words",
]
