# src/cache_manager/policies/base.py
from typing import Hashable, Optional


class EvictionPolicy:
    """
    Key-only bookkeeping consulted by CacheManager in capacity mode.
    Policies never see values.
    """
    inconsistencies = 0

    def register(self, key: Hashable) -> None: ...
    def touch(self, key: Hashable) -> bool: ...
    def forget(self, key: Hashable) -> bool: ...
    def eviction_candidate(self, tracked_count: int,
                           capacity: int) -> Optional[Hashable]: ...

    @property
    def tracked_count(self) -> int:
        return 0
