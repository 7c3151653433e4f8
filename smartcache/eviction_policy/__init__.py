"""Pluggable eviction policies."""

from smartcache.eviction_policy.eviction_policy import EvictionPolicy, EvictionPolicyType
from smartcache.eviction_policy.fifo_policy import FIFOPolicy
from smartcache.eviction_policy.lfu_policy import LFUPolicy
from smartcache.eviction_policy.lru_policy import LRUPolicy
from smartcache.eviction_policy.order_list import IndexedOrderList

POLICY_CLASSES = {
    EvictionPolicyType.LRU: LRUPolicy,
    EvictionPolicyType.FIFO: FIFOPolicy,
    EvictionPolicyType.LFU: LFUPolicy,
}

__all__ = [
    "EvictionPolicy",
    "EvictionPolicyType",
    "FIFOPolicy",
    "IndexedOrderList",
    "LFUPolicy",
    "LRUPolicy",
    "POLICY_CLASSES",
]
