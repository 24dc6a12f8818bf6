# src/cache_manager/policies/key_index.py
from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, Optional

from .frequency_index import RecencyNode


@dataclass
class KeyRecord:
    frequency: int
    node:      RecencyNode


class KeyIndex:
    """key -> KeyRecord for every tracked key."""
    def __init__(self):
        self.records: Dict[Hashable, KeyRecord] = {}

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.records

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.records)

    def get(self, key: Hashable) -> Optional[KeyRecord]:
        return self.records.get(key)

    def add(self, key: Hashable, node: RecencyNode, frequency: int = 1) -> KeyRecord:
        record = self.records[key] = KeyRecord(frequency, node)
        return record

    def drop(self, key: Hashable) -> Optional[KeyRecord]:
        return self.records.pop(key, None)
