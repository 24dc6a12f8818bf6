"""In-memory key/value cache with optional LFU+LRU eviction."""

from cache_manager.policies.lfu import EvictionManager
from cache_manager.store import CacheManager

__version__ = "0.1.0"

__all__ = ["CacheManager", "EvictionManager", "__version__"]
