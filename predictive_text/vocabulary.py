# vocabulary.py
# Seed vocabulary: common English words with starting frequencies.
# Loaded into a fresh engine so suggestions work before any training.
# "would" is listed twice on purpose; the second insert adds to the first.

from typing import List, Tuple

COMMON_WORDS: List[Tuple[str, int]] = [
    ("the", 100), ("and", 90), ("to", 85), ("of", 80), ("a", 75),
    ("in", 70), ("is", 65), ("it", 60), ("you", 55), ("that", 50),
    ("he", 45), ("was", 45), ("for", 40), ("on", 40), ("are", 35),
    ("as", 35), ("with", 30), ("his", 30), ("they", 25), ("i", 25),
    ("at", 20), ("be", 20), ("this", 20), ("have", 18), ("from", 18),
    ("or", 15), ("one", 15), ("had", 15), ("by", 12), ("word", 12),
    ("but", 10), ("not", 10), ("what", 10), ("all", 8), ("were", 8),
    ("would", 7), ("there", 7), ("we", 6), ("when", 6), ("your", 5),
    ("can", 12), ("said", 11), ("each", 9), ("which", 9), ("she", 8),
    ("do", 15), ("how", 12), ("their", 10), ("if", 14), ("will", 13),
    ("up", 11), ("other", 8), ("about", 7), ("out", 10), ("many", 6),
    ("then", 9), ("them", 8), ("these", 6), ("so", 12), ("some", 7),
    ("her", 9), ("would", 7), ("make", 8), ("like", 9), ("into", 6),
    ("him", 7), ("time", 8), ("has", 9), ("two", 6), ("more", 7),
    ("go", 8), ("no", 9), ("way", 6), ("could", 6), ("my", 10),
    ("than", 6), ("first", 5), ("been", 6), ("call", 4), ("who", 7),
    ("its", 5), ("now", 8), ("find", 5), ("long", 4), ("down", 5),
    ("day", 6), ("did", 6), ("get", 8), ("come", 5), ("made", 5),
    ("may", 4), ("part", 4), ("over", 5), ("new", 6), ("sound", 3),
    ("take", 6), ("only", 5), ("little", 4), ("work", 5), ("know", 7),
]
