# src/cache_manager/policies/lfu.py
import logging
from typing import Hashable, List, Optional

from .base import EvictionPolicy
from .frequency_index import FrequencyIndex
from .key_index import KeyIndex

logger = logging.getLogger(__name__)


class EvictionManager(EvictionPolicy):
    """
    Least-Frequently-Used bookkeeping with LRU tie-break.

    Keys are bucketed by touch count; each bucket is a recency list, so the
    victim is the tail of the lowest populated bucket. `min_freq` is a running
    lower bound on that bucket: it is reset to 1 by `register` and advanced by
    one when `touch` empties the bucket it points at. Eviction is only asked
    for right after a `register`, where the bound is exact.
    """
    def __init__(self, capacity: Optional[int] = None):
        self.capacity        = capacity
        self.frequencies     = FrequencyIndex()
        self.keys            = KeyIndex()
        self.min_freq        = 0          # 0 while nothing has been registered
        self.inconsistencies = 0

    @property
    def tracked_count(self) -> int:
        return len(self.keys)

    @property
    def min_frequency(self) -> int:
        return self.min_freq

    def __contains__(self, key: Hashable) -> bool:
        return key in self.keys

    def frequency_of(self, key: Hashable) -> Optional[int]:
        record = self.keys.get(key)
        return record.frequency if record is not None else None

    def keys_at(self, freq: int) -> List[Hashable]:
        """Keys of bucket `freq`, most recent first."""
        return self.frequencies.keys_at(freq)

    # ----------------------------------------------------------
    def register(self, key: Hashable) -> None:
        node = self.frequencies.push(1, key)
        self.keys.add(key, node, 1)
        self.min_freq = 1

    def touch(self, key: Hashable) -> bool:
        record = self.keys.get(key)
        if record is None:
            self._inconsistent("touch", key)
            return False

        old = record.frequency
        emptied = self.frequencies.unlink(old, record.node)
        if emptied and old == self.min_freq:
            self.min_freq = old + 1

        record.frequency = old + 1
        record.node      = self.frequencies.push(old + 1, key)
        return True

    def forget(self, key: Hashable) -> bool:
        record = self.keys.drop(key)
        if record is None:
            self._inconsistent("forget", key)
            return False
        self.frequencies.unlink(record.frequency, record.node)
        return True

    def eviction_candidate(self, tracked_count: int,
                           capacity: Optional[int] = None) -> Optional[Hashable]:
        if capacity is None:
            capacity = self.capacity
        if capacity is None or tracked_count <= capacity or not self.keys:
            return None

        if self.min_freq not in self.frequencies:
            # bound went stale through forget() with no register since
            self.min_freq = self.frequencies.lowest()

        key = self.frequencies.pop_oldest(self.min_freq)
        self.keys.drop(key)
        return key

    # ----------------------------------------------------------
    def _inconsistent(self, op: str, key: Hashable) -> None:
        self.inconsistencies += 1
        logger.warning(
            "EvictionManager.%s: key %r is not tracked; cache state is inconsistent",
            op, key,
        )
