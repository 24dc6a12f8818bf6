"""O(n) scanning LFU+LRU used to cross-check EvictionManager."""

from __future__ import annotations

from cache_manager.policies.base import EvictionPolicy


class ScanningLfu(EvictionPolicy):
    def __init__(self) -> None:
        self.freq: dict = {}
        self.stamp: dict = {}
        self.clock = 0
        self.inconsistencies = 0

    @property
    def tracked_count(self) -> int:
        return len(self.freq)

    def _tick(self, key) -> None:
        self.clock += 1
        self.stamp[key] = self.clock

    def register(self, key) -> None:
        self.freq[key] = 1
        self._tick(key)

    def touch(self, key) -> bool:
        if key not in self.freq:
            self.inconsistencies += 1
            return False
        self.freq[key] += 1
        self._tick(key)
        return True

    def forget(self, key) -> bool:
        if key not in self.freq:
            self.inconsistencies += 1
            return False
        del self.freq[key]
        del self.stamp[key]
        return True

    def eviction_candidate(self, tracked_count, capacity):
        if tracked_count <= capacity or not self.freq:
            return None
        victim = min(self.freq, key=lambda k: (self.freq[k], self.stamp[k]))
        self.forget(victim)
        return victim
