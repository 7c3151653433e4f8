"""Base cache interface for in-memory cache implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable
import structlog

from smartcache import metrics
from smartcache.eviction_policy.eviction_policy import EvictionPolicy
from smartcache.exceptions import InvalidCapacityError, InvalidConfigurationError
from smartcache.rwlock import ReadWriteLock
from smartcache.sentinels import MISS

logger = structlog.get_logger()


class BaseCache(ABC):
    """
    Abstract base class for cache implementations.

    Owns the key mapping, the live entry counter, the eviction policy and
    the reader-writer lock. Subclasses decide what is stored per key and
    implement the lookup operations; insertion, eviction and removal
    bookkeeping live here so that every change to the mapping is mirrored
    by exactly one policy callback.
    """

    def __init__(self, capacity: int, policy: EvictionPolicy, name: str = "default"):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of keys the cache can hold
            policy: Eviction policy consulted when the cache overflows
            name: Label used in logs and metrics

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
            InvalidConfigurationError: If policy is missing or not an EvictionPolicy
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)
        if policy is None:
            raise InvalidConfigurationError("Eviction policy cannot be None")
        if not isinstance(policy, EvictionPolicy):
            raise InvalidConfigurationError(
                f"Eviction policy must be an EvictionPolicy, got {type(policy).__name__}"
            )
        policy.attach(self)

        self._capacity = capacity
        self._policy = policy
        self._name = name
        self._entries: Dict[Hashable, Any] = {}
        self._size = 0
        self._lock = ReadWriteLock()

        logger.debug(
            "Created cache",
            cache=name,
            cache_type=type(self).__name__,
            capacity=capacity,
            strategy=policy.name
        )

    @abstractmethod
    def get(self, key: Hashable, default: Any = MISS) -> Any:
        """
        Get a value from the cache by key.

        Args:
            key: The key to look up
            default: Returned on a miss

        Returns:
            The value associated with the key, or ``default`` (``MISS``) if not found
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or update a key-value pair in the cache.

        Args:
            key: The key to store
            value: The value to store
        """
        pass

    @abstractmethod
    def remove(self, key: Hashable) -> Any:
        """
        Remove a key from the cache.

        Args:
            key: The key to remove

        Returns:
            The removed value, or ``MISS`` if the key was absent
        """
        pass

    @abstractmethod
    def contains_key(self, key: Hashable) -> bool:
        """Check whether a key is present, without touching the policy."""
        pass

    def size(self) -> int:
        """
        Get the current number of keys in the cache.

        Returns:
            The number of keys currently in the cache
        """
        with self._lock.read_locked():
            return self._size

    def capacity(self) -> int:
        """Get the maximum number of keys the cache can hold."""
        return self._capacity

    def clear(self) -> None:
        """Clear all entries from the cache and reset the policy."""
        with self._lock.write_locked():
            dropped = self._size
            self._entries.clear()
            self._policy.clear()
            self._size = 0

        logger.info("Cleared cache", cache=self._name, dropped=dropped)

    def strategy_name(self) -> str:
        """Get the identifier of the active eviction policy."""
        return self._policy.name

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Hashable) -> bool:
        return self.contains_key(key)

    def _insert_entry(self, key: Hashable, stored: Any) -> None:
        """
        Add a new key and evict one entry if the cache overflowed.

        Caller must hold the write lock and know that ``key`` is new. If the
        policy raises, the key is taken back out before re-raising.
        """
        self._entries[key] = stored
        try:
            self._policy.record_insertion(key)
        except Exception:
            del self._entries[key]
            raise
        self._size += 1

        if self._size > self._capacity:
            self._evict_one()

    def _evict_one(self) -> None:
        """Evict the policy's candidate. Caller must hold the write lock."""
        candidate = self._policy.select_eviction_candidate()
        if candidate is MISS:
            return

        self._discard_entry(candidate)
        metrics.record_eviction(self._name, self._policy.name)
        logger.debug("Evicted cache entry", cache=self._name, key=candidate, strategy=self._policy.name)

    def _discard_entry(self, key: Hashable) -> Any:
        """
        Remove a present key and return what was stored for it.

        Caller must hold the write lock. The policy is told first so that a
        raising policy leaves the mapping untouched.
        """
        self._policy.record_removal(key)
        stored = self._entries.pop(key)
        self._size -= 1
        return stored
