# src/cache_manager/policies/frequency_index.py
from typing import Dict, Hashable, Iterator, List, Optional


class RecencyNode:
    __slots__ = ("key", "prev", "next")

    def __init__(self, key: Hashable):
        self.key  = key
        self.prev = None
        self.next = None


class RecencyList:
    """
    Doubly linked list of keys. Head is the most recent touch,
    tail the least recent one.
    """
    def __init__(self):
        self.head  = None
        self.tail  = None
        self.count = 0

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Hashable]:
        node = self.head
        while node is not None:
            yield node.key
            node = node.next

    # ----------------------------------------------------------
    def push_front(self, key: Hashable) -> RecencyNode:
        node = RecencyNode(key)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next      = self.head
            self.head.prev = node
            self.head      = node
        self.count += 1
        return node

    def unlink(self, node: RecencyNode) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next

        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev

        node.prev = node.next = None
        self.count -= 1

    def pop_back(self) -> Optional[RecencyNode]:
        node = self.tail
        if node is None:
            return None
        self.unlink(node)
        return node


class FrequencyIndex:
    """
    frequency -> RecencyList of the keys sharing that frequency.
    A bucket only exists while it holds at least one key.
    """
    def __init__(self):
        self.buckets: Dict[int, RecencyList] = {}

    def __len__(self) -> int:
        return len(self.buckets)

    def __contains__(self, freq: int) -> bool:
        return freq in self.buckets

    # ----------------------------------------------------------
    def push(self, freq: int, key: Hashable) -> RecencyNode:
        """Insert `key` as the most recent entry of bucket `freq`."""
        bucket = self.buckets.get(freq)
        if bucket is None:
            bucket = self.buckets[freq] = RecencyList()
        return bucket.push_front(key)

    def unlink(self, freq: int, node: RecencyNode) -> bool:
        """Remove `node` from bucket `freq`. Returns True if the bucket emptied."""
        bucket = self.buckets.get(freq)
        if bucket is None:
            return False
        bucket.unlink(node)
        if bucket.count == 0:
            del self.buckets[freq]
            return True
        return False

    def pop_oldest(self, freq: int) -> Optional[Hashable]:
        bucket = self.buckets.get(freq)
        if bucket is None:
            return None
        node = bucket.pop_back()
        if bucket.count == 0:
            del self.buckets[freq]
        return node.key if node is not None else None

    def lowest(self) -> Optional[int]:
        # O(#buckets); only used to recover a stale running minimum
        return min(self.buckets) if self.buckets else None

    def keys_at(self, freq: int) -> List[Hashable]:
        bucket = self.buckets.get(freq)
        return list(bucket) if bucket is not None else []

    def frequencies(self) -> List[int]:
        return sorted(self.buckets)
