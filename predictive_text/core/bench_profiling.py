# bench_profiling.py
"""
Simple benchmark harness for PredictiveText.suggest

Inserts a fixed set of technical words with random frequencies, then times
`operations` suggest() calls on random 1-4 character prefixes of them.
Pass a seeded random.Random for repeatable runs.
"""

from __future__ import annotations
import random
import statistics
import time
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from ..autocompleter import PredictiveText

BENCHMARK_WORDS: List[str] = [
    "algorithm", "application", "computer", "programming", "development",
    "artificial", "intelligence", "machine", "learning", "technology",
    "software", "hardware", "network", "database", "security",
    "framework", "interface", "structure", "function", "variable",
    "optimization", "implementation", "documentation", "debugging", "testing",
]


def run_benchmark(
    engine: "PredictiveText",
    operations: int = 1000,
    rng: Optional[random.Random] = None,
) -> Dict[str, float]:
    rng = rng or random.Random()

    t_start = time.perf_counter()
    for word in BENCHMARK_WORDS:
        engine.insert(word, rng.randint(1, 50))

    times = []
    for _ in range(operations):
        word = rng.choice(BENCHMARK_WORDS)
        prefix = word[: rng.randint(1, 4)]
        t0 = time.perf_counter()
        engine.suggest(prefix)
        times.append((time.perf_counter() - t0) * 1e6)  # us
    total_us = (time.perf_counter() - t_start) * 1e6

    total_ops = operations + len(BENCHMARK_WORDS)
    return {
        "operations": total_ops,
        "total_us": total_us,
        "mean_us": total_us / total_ops,
        "median_suggest_us": statistics.median(times) if times else 0.0,
        "max_suggest_us": max(times) if times else 0.0,
    }
