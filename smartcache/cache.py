"""Bounded cache with a pluggable eviction policy."""

from typing import Any, Hashable

from smartcache import metrics
from smartcache.base import BaseCache
from smartcache.sentinels import MISS


class Cache(BaseCache):
    """
    Thread-safe bounded cache.

    Uses a dict for O(1) key lookup and delegates the choice of which
    key to evict on overflow to its eviction policy.

    ``get`` takes the write lock because a hit updates policy bookkeeping.
    """

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        """
        Get a value from the cache by key.

        Records the access with the eviction policy on a hit.

        Args:
            key: The key to look up
            default: Returned on a miss

        Returns:
            The value associated with the key, or ``default`` (``MISS``) if not found
        """
        with self._lock.write_locked():
            if key not in self._entries:
                metrics.record_get(self._name, hit=False)
                return default

            value = self._entries[key]
            self._policy.record_access(key)
            metrics.record_get(self._name, hit=True)
            return value

    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or update a key-value pair in the cache.

        If key exists, updates the value in place and records an access;
        this never evicts. If key doesn't exist, inserts it and evicts the
        policy's candidate if the cache is now over capacity.

        Args:
            key: The key to store
            value: The value to store
        """
        with self._lock.write_locked():
            if key in self._entries:
                self._entries[key] = value
                self._policy.record_access(key)
                return

            self._insert_entry(key, value)

    def remove(self, key: Hashable) -> Any:
        """
        Remove a key from the cache.

        Args:
            key: The key to remove

        Returns:
            The removed value, or ``MISS`` if the key was not in the cache
        """
        with self._lock.write_locked():
            if key not in self._entries:
                return MISS
            return self._discard_entry(key)

    def contains_key(self, key: Hashable) -> bool:
        with self._lock.read_locked():
            return key in self._entries

    def __repr__(self) -> str:
        with self._lock.read_locked():
            return (
                f"Cache(capacity={self._capacity}, size={self._size}, "
                f"strategy={self._policy.name}, entries={self._entries!r})"
            )
