# src/cache_manager/metrics.py
import time
import tracemalloc
from typing import Any, Dict, Optional

import pandas as pd

from .simulator import CacheSim
from .snapshot import format_snapshot


def replay_with_metrics(df: pd.DataFrame, capacity: Optional[Any] = None,
                        iterations: int = 1) -> Dict[str, Any]:
    sim = CacheSim(capacity)
    tracing = tracemalloc.is_tracing()
    if not tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    start = time.perf_counter()
    hit_ratio = sim.replay(df, iterations)
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    if not tracing:
        tracemalloc.stop()

    cache = sim.cache
    return {
        "hit_ratio":       hit_ratio,
        "gets":            sim.gets,
        "hits":            sim.hits,
        "puts":            sim.puts,
        "removes":         sim.removes,
        "evictions":       cache.eviction_count,
        "items":           cache.count,
        "tracked":         cache.tracked_count,
        "inconsistencies": cache.inconsistency_count,
        "elapsed_s":       elapsed,
        "peak_mb":         peak / (1024 * 1024),
        "snapshot":        format_snapshot(cache.snapshot()),
    }
