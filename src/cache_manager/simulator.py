# src/cache_manager/simulator.py
from typing import Any, Optional

import pandas as pd

from .store import CacheManager


class CacheSim:
    """
    Replays an op-log DataFrame (columns op, key, value) through a
    CacheManager. Each replay keeps running counters of what it did.
    """
    def __init__(self, capacity: Optional[Any] = None):
        self.cache   = CacheManager(capacity)
        self.gets    = 0
        self.hits    = 0
        self.puts    = 0
        self.removes = 0

    def apply(self, op: str, key, value=None) -> bool:
        """Run one operation. Returns True on a GET hit or a REMOVE that removed."""
        if op == "PUT":
            self.puts += 1
            self.cache.put(key, value)
            return False
        if op == "GET":
            self.gets += 1
            found, _ = self.cache.try_get(key)
            if found:
                self.hits += 1
            return found
        if op == "REMOVE":
            self.removes += 1
            return self.cache.remove(key)
        return False

    # ----------------------------------------------------------
    def replay(self, df: pd.DataFrame, iterations: int = 1) -> float:
        """Replay `df` `iterations` times; returns the GET hit ratio."""
        for _ in range(iterations):
            for row in df.itertuples(index=False):
                self.apply(row.op, row.key, row.value)
        return self.hits / self.gets if self.gets else 0.0
