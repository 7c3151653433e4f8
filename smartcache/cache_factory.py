"""Factory for creating cache instances based on eviction policy."""

from typing import Union, Optional
import threading
import structlog

from smartcache.base import BaseCache
from smartcache.cache import Cache
from smartcache.config import settings
from smartcache.eviction_policy import POLICY_CLASSES
from smartcache.eviction_policy.eviction_policy import EvictionPolicy, EvictionPolicyType
from smartcache.exceptions import InvalidCapacityError, InvalidEvictionPolicyError
from smartcache.ttl_cache import TTL, TTLCache

logger = structlog.get_logger()

# Singleton cache instance
_cache_instance: Optional[BaseCache] = None
_cache_lock = threading.Lock()


def create_policy(eviction_policy: Union[EvictionPolicyType, str]) -> EvictionPolicy:
    """
    Create a fresh eviction policy from its name.

    Args:
        eviction_policy: The policy type, or its name (case-insensitive)

    Returns:
        A new, unattached policy instance

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
    """
    if isinstance(eviction_policy, str) and not isinstance(eviction_policy, EvictionPolicyType):
        try:
            eviction_policy = EvictionPolicyType(eviction_policy.strip().upper())
        except ValueError:
            raise InvalidEvictionPolicyError(eviction_policy)

    policy_class = POLICY_CLASSES.get(eviction_policy)
    if policy_class is None:
        raise InvalidEvictionPolicyError(eviction_policy)
    return policy_class()


def create_cache(
    eviction_policy: Union[EvictionPolicyType, str],
    capacity: int,
    ttl: bool = False,
    default_ttl: Optional[TTL] = None,
    name: str = "default"
) -> BaseCache:
    """
    Create a cache instance based on the specified eviction policy.

    Args:
        eviction_policy: The eviction policy to use (LRU, FIFO or LFU)
        capacity: Maximum number of keys the cache can hold
        ttl: Create a TTLCache instead of a plain Cache
        default_ttl: Default TTL for the TTLCache; None means never expire
        name: Label used in logs and metrics

    Returns:
        A cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
        InvalidCapacityError: If capacity is invalid
    """
    # Validate capacity before building anything
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacityError(capacity)

    policy = create_policy(eviction_policy)

    if ttl:
        return TTLCache(capacity, policy, name=name, default_ttl=default_ttl)
    return Cache(capacity, policy, name=name)


def get_in_memory_cache(
    eviction_policy: Optional[Union[EvictionPolicyType, str]] = None,
    capacity: Optional[int] = None
) -> BaseCache:
    """
    Get the singleton in-memory cache instance.

    On first call, initializes the cache with the provided parameters.
    On subsequent calls, returns the same instance (parameters are ignored).
    Missing parameters, the cache type and its name come from settings.

    Args:
        eviction_policy: Optional eviction policy to use (LRU, FIFO or LFU).
                        Defaults to settings.default_eviction_policy.
        capacity: Optional maximum number of keys the cache can hold.
                  Defaults to settings.default_capacity.

    Returns:
        The singleton cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported (only on first call)
        InvalidCapacityError: If capacity is invalid (only on first call)

    Example:
        # First call - initializes from settings (LRU, 1000 by default)
        cache = get_in_memory_cache()

        # Subsequent calls - returns same instance, parameters ignored
        cache2 = get_in_memory_cache(EvictionPolicyType.LFU, 2000)  # Same instance as cache
    """
    global _cache_instance

    # Double-checked locking pattern for thread-safe singleton
    if _cache_instance is None:
        with _cache_lock:
            if _cache_instance is None:
                if eviction_policy is None:
                    eviction_policy = settings.default_eviction_policy
                if capacity is None:
                    capacity = settings.default_capacity

                _cache_instance = create_cache(
                    eviction_policy,
                    capacity,
                    ttl=settings.enable_ttl,
                    default_ttl=settings.default_ttl_seconds,
                    name=settings.cache_name
                )
                logger.info(
                    "Initialized in-memory cache",
                    cache=settings.cache_name,
                    strategy=_cache_instance.strategy_name(),
                    capacity=capacity,
                    ttl=settings.enable_ttl
                )

    return _cache_instance


def reset_in_memory_cache() -> None:
    """Drop the singleton so the next get_in_memory_cache() call builds a new one."""
    global _cache_instance

    with _cache_lock:
        _cache_instance = None
