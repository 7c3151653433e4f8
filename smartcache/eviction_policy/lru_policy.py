"""LRU (Least Recently Used) eviction policy."""

from typing import Any, Hashable

from smartcache.eviction_policy.eviction_policy import EvictionPolicy
from smartcache.eviction_policy.order_list import IndexedOrderList


class LRUPolicy(EvictionPolicy):
    """
    LRU (Least Recently Used) eviction policy.

    Keeps keys in an index-linked list ordered by last touch: insertions
    and accesses move a key to the head, and the tail is the eviction
    candidate. Every operation is O(1).
    """

    def __init__(self):
        super().__init__()
        self._order = IndexedOrderList()

    def record_insertion(self, key: Hashable) -> None:
        self._order.add_to_head(key)

    def record_access(self, key: Hashable) -> None:
        # Move to head (most recently used)
        self._order.move_to_head(key)

    def record_removal(self, key: Hashable) -> None:
        self._order.remove(key)

    def select_eviction_candidate(self) -> Any:
        return self._order.tail()

    def clear(self) -> None:
        self._order.clear()

    def __len__(self) -> int:
        return len(self._order)
