"""In-memory bounded cache with pluggable eviction policies and optional TTL."""

from smartcache.base import BaseCache
from smartcache.cache import Cache
from smartcache.cache_factory import (
    create_cache,
    create_policy,
    get_in_memory_cache,
    reset_in_memory_cache
)
from smartcache.eviction_policy import (
    EvictionPolicy,
    EvictionPolicyType,
    FIFOPolicy,
    LFUPolicy,
    LRUPolicy
)
from smartcache.exceptions import (
    InvalidCapacityError,
    InvalidConfigurationError,
    InvalidEvictionPolicyError,
    InvalidTTLError,
    PolicyAlreadyAttachedError
)
from smartcache.sentinels import MISS
from smartcache.ttl_cache import CacheEntry, CacheStats, TTLCache

__all__ = [
    "MISS",
    "BaseCache",
    "Cache",
    "TTLCache",
    "CacheEntry",
    "CacheStats",
    "create_cache",
    "create_policy",
    "get_in_memory_cache",
    "reset_in_memory_cache",
    "EvictionPolicy",
    "EvictionPolicyType",
    "LRUPolicy",
    "FIFOPolicy",
    "LFUPolicy",
    "InvalidConfigurationError",
    "InvalidCapacityError",
    "InvalidEvictionPolicyError",
    "InvalidTTLError",
    "PolicyAlreadyAttachedError",
]
