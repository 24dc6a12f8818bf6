# src/cache_manager/store.py
import logging
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Tuple

from .policies.base import EvictionPolicy
from .policies.lfu import EvictionManager

logger = logging.getLogger(__name__)


def normalize_capacity(capacity: Any) -> Optional[int]:
    """Positive int -> capacity; anything else means an unlimited cache."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        return None
    return capacity if capacity > 0 else None


class CacheManager:
    """
    Key/value store with optional LFU+LRU eviction.

    With a positive `capacity` every mutation is reported to an
    EvictionManager and the store never holds more than `capacity` entries
    once `put` returns. Without one there is no eviction bookkeeping at all
    and `policy` is ignored.
    """
    def __init__(self, capacity: Any = None,
                 policy: Optional[EvictionPolicy] = None):
        self.items: dict = {}
        self.capacity = normalize_capacity(capacity)
        self.eviction = None
        if self.capacity is not None:
            self.eviction = policy if policy is not None else EvictionManager(self.capacity)
        self.evictions = 0

    # ----------------------------------------------------------
    def put(self, key: Hashable, value: Any) -> None:
        exists = key in self.items
        self.items[key] = value
        if self.eviction is None:
            return

        if exists:
            self.eviction.touch(key)
            return

        self.eviction.register(key)
        victim = self.eviction.eviction_candidate(len(self.items), self.capacity)
        if victim is None:
            return
        self.evictions += 1
        if victim != key:
            del self.items[victim]
        else:
            # every resident is hotter than a brand-new key: not admitted
            logger.info("put(%r) not admitted; all residents are more frequent", key)
            del self.items[key]

    def try_get(self, key: Hashable) -> Tuple[bool, Any]:
        if key not in self.items:
            return False, None
        value = self.items[key]
        if self.eviction is not None:
            self.eviction.touch(key)
        return True, value

    def get(self, key: Hashable, default: Any = None) -> Any:
        found, value = self.try_get(key)
        return value if found else default

    def remove(self, key: Hashable) -> bool:
        if key not in self.items:
            return False
        del self.items[key]
        if self.eviction is not None:
            self.eviction.forget(key)
        return True

    def snapshot(self) -> Mapping:
        return MappingProxyType(dict(self.items))

    # ----------------------------------------------------------
    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def tracked_count(self) -> int:
        return self.eviction.tracked_count if self.eviction is not None else 0

    @property
    def eviction_count(self) -> int:
        return self.evictions

    @property
    def inconsistency_count(self) -> int:
        return self.eviction.inconsistencies if self.eviction is not None else 0

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.items
