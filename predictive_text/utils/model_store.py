# model_store.py - persistence for the learned frequency table

# Flat text format, one stored word per line:
#     <word> <frequency>
# no header, no metadata. Lines are written in the Trie's natural DFS order.
# Loading adds each frequency to whatever the Trie already holds, so loading
# the same file twice doubles the counts.
# Both directions report failure by returning False and never raise on I/O.
# Bytes that are not valid UTF-8 pass through unchanged (surrogateescape),
# so such a word loads and saves back byte for byte.

from __future__ import annotations
import logging
import os
from typing import Optional, Tuple, Union

from ..core.trie import Trie

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def format_entry(word: str, freq: int) -> str:
    return f"{word} {freq}"


def parse_entry(line: str) -> Optional[Tuple[str, int]]:
    """
    Parse one model line into (word, freq).
    Extra tokens after the frequency are ignored. Returns None when the line
    has fewer than two tokens or the frequency is not a run of ASCII digits.
    """
    parts = line.split()
    if len(parts) < 2:
        return None
    word, raw = parts[0], parts[1]
    # plain ASCII digits only: no sign, no underscores
    if not (raw.isascii() and raw.isdigit()):
        return None
    return word, int(raw)


def save_model(trie: Trie, path: PathLike) -> bool:
    """
    Write every (word, freq) in the Trie to `path`.
    Returns:
        bool: True on success, False if the file could not be written.
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as f:
            for word, freq in trie.entries():
                f.write(format_entry(word, freq) + "\n")
                count += 1
    except OSError as e:
        logger.error("Could not save model to %s: %s", path, e)
        return False
    logger.info("Model saved to %s (%d words)", path, count)
    return True


def load_model(trie: Trie, path: PathLike) -> bool:
    """
    Read (word, freq) lines from `path` and insert them into the Trie.
    Malformed lines are skipped.
    Returns:
        bool: True if the file was read, False if it could not be opened.
    """
    loaded = skipped = 0
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            for lineno, line in enumerate(f, 1):
                entry = parse_entry(line)
                if entry is None:
                    if line.strip():
                        logger.debug("%s:%d: skipping malformed line %r", path, lineno, line)
                    skipped += 1
                    continue
                trie.insert(*entry)
                loaded += 1
    except OSError as e:
        logger.warning("Could not load model from %s: %s", path, e)
        return False
    logger.info("Model loaded from %s (%d entries, %d skipped)", path, loaded, skipped)
    return True
