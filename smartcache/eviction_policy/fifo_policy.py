"""FIFO (First In First Out) eviction policy."""

from typing import Any, Hashable

from smartcache.eviction_policy.eviction_policy import EvictionPolicy
from smartcache.eviction_policy.order_list import IndexedOrderList


class FIFOPolicy(EvictionPolicy):
    """
    FIFO (First In First Out) eviction policy.

    Evicts the earliest inserted key that is still tracked. Reads and
    updates never change a key's position.
    """

    def __init__(self):
        super().__init__()
        self._order = IndexedOrderList()

    def record_insertion(self, key: Hashable) -> None:
        self._order.add_to_head(key)

    def record_access(self, key: Hashable) -> None:
        # Insertion order only
        pass

    def record_removal(self, key: Hashable) -> None:
        self._order.remove(key)

    def select_eviction_candidate(self) -> Any:
        return self._order.tail()

    def clear(self) -> None:
        self._order.clear()

    def __len__(self) -> int:
        return len(self._order)
