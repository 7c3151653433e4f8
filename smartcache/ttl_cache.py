"""Bounded cache with per-entry time-to-live."""

import math
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Hashable, Optional, Union
import structlog
from pydantic import BaseModel, ConfigDict, Field

from smartcache import metrics
from smartcache.base import BaseCache
from smartcache.eviction_policy.eviction_policy import EvictionPolicy
from smartcache.exceptions import InvalidTTLError
from smartcache.sentinels import MISS

logger = structlog.get_logger()

TTL = Union[int, float, timedelta]

# Expiry instant of entries that never expire.
NEVER = math.inf


def ttl_to_seconds(ttl: Optional[TTL]) -> float:
    """
    Convert a ttl to seconds.

    ``None``, ``math.inf`` and ``timedelta.max`` mean "never expire" and
    map to ``math.inf``.

    Args:
        ttl: Seconds as int/float, or a timedelta

    Returns:
        The ttl in seconds

    Raises:
        InvalidTTLError: If the ttl is negative, NaN or not a duration
    """
    if ttl is None:
        return NEVER
    if isinstance(ttl, timedelta):
        if ttl == timedelta.max:
            return NEVER
        seconds = ttl.total_seconds()
    elif isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidTTLError(ttl)
    else:
        seconds = float(ttl)

    if math.isnan(seconds) or seconds < 0:
        raise InvalidTTLError(ttl)
    return seconds


@dataclass(frozen=True)
class CacheEntry:
    """Cache value paired with its absolute expiry instant."""
    value: Any
    expires_at: float = NEVER

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at

    def remaining(self, now: float) -> float:
        """Seconds until expiry, 0.0 if already past it."""
        return max(0.0, self.expires_at - now)


class CacheStats(BaseModel):
    """Snapshot of TTL cache usage counters."""

    model_config = ConfigDict(frozen=True)

    total_puts: int = Field(..., ge=0, description="Number of put() calls")
    total_gets: int = Field(..., ge=0, description="Number of get() calls")
    cache_hits: int = Field(..., ge=0, description="get() calls that returned a live value")
    cache_misses: int = Field(..., ge=0, description="get() calls that found nothing or an expired entry")
    expirations: int = Field(..., ge=0, description="Entries removed because their TTL elapsed")
    hit_rate: float = Field(..., ge=0.0, le=1.0, description="cache_hits / total_gets, 0 before the first get")
    size: int = Field(..., ge=0, description="Entries stored, including expired ones not yet removed")
    capacity: int = Field(..., gt=0, description="Maximum number of entries")
    strategy_name: str = Field(..., description="Active eviction policy")

    @property
    def hit_rate_percent(self) -> float:
        return self.hit_rate * 100

    def __str__(self) -> str:
        return (
            f"Stats(total_puts={self.total_puts}, total_gets={self.total_gets}, "
            f"cache_hits={self.cache_hits}, cache_misses={self.cache_misses}, "
            f"expirations={self.expirations}, hit_rate={self.hit_rate_percent:.2f}%, "
            f"size={self.size}/{self.capacity}, strategy={self.strategy_name})"
        )


class TTLCache(BaseCache):
    """
    Thread-safe bounded cache with per-entry TTL.

    Expired entries are dropped lazily when ``get`` or ``remove`` reaches
    them, or eagerly by ``cleanup_expired``. Until then they still take a
    capacity slot and stay tracked by the policy, and eviction follows the
    policy's own order without preferring expired entries.

    Usage counters survive ``clear``.
    """

    def __init__(
        self,
        capacity: int,
        policy: EvictionPolicy,
        name: str = "default",
        default_ttl: Optional[TTL] = None,
        time_fn: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the TTL cache.

        Args:
            capacity: Maximum number of keys the cache can hold
            policy: Eviction policy consulted when the cache overflows
            name: Label used in logs and metrics
            default_ttl: TTL used by put() when none is given; None means never expire
            time_fn: Monotonic clock returning seconds
        """
        self._default_ttl = ttl_to_seconds(default_ttl)
        super().__init__(capacity, policy, name)
        self._time_fn = time_fn

        self._total_puts = 0
        self._total_gets = 0
        self._cache_hits = 0
        self._cache_misses = 0
        self._expirations = 0

    def put(self, key: Hashable, value: Any, ttl: Optional[TTL] = None) -> None:
        """
        Insert or update a key with an optional TTL.

        Updating an existing key replaces its value and expiry and records
        an access; it never evicts.

        Args:
            key: The key to store
            value: The value to store
            ttl: Seconds or timedelta until expiry; None uses the cache default

        Raises:
            InvalidTTLError: If ttl is negative
        """
        seconds = self._default_ttl if ttl is None else ttl_to_seconds(ttl)

        with self._lock.write_locked():
            self._total_puts += 1
            entry = CacheEntry(value, self._time_fn() + seconds)

            if key in self._entries:
                self._entries[key] = entry
                self._policy.record_access(key)
                return

            self._insert_entry(key, entry)

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        """
        Get a live value from the cache by key.

        An expired entry is removed on the spot and reported as a miss.

        Args:
            key: The key to look up
            default: Returned on a miss

        Returns:
            The value, or ``default`` (``MISS``) if absent or expired
        """
        with self._lock.write_locked():
            self._total_gets += 1

            entry = self._entries.get(key)
            if entry is None:
                self._cache_misses += 1
                metrics.record_get(self._name, hit=False)
                return default

            if entry.is_expired(self._time_fn()):
                self._discard_entry(key)
                self._expirations += 1
                self._cache_misses += 1
                metrics.record_expirations(self._name)
                metrics.record_get(self._name, hit=False)
                logger.debug("Expired cache entry on read", cache=self._name, key=key)
                return default

            self._cache_hits += 1
            self._policy.record_access(key)
            metrics.record_get(self._name, hit=True)
            return entry.value

    def remove(self, key: Hashable) -> Any:
        """
        Remove a key from the cache.

        An expired entry is removed as well but reported as absent.

        Args:
            key: The key to remove

        Returns:
            The removed value, or ``MISS`` if absent or expired
        """
        with self._lock.write_locked():
            entry = self._entries.get(key)
            if entry is None:
                return MISS

            self._discard_entry(key)
            if entry.is_expired(self._time_fn()):
                self._expirations += 1
                metrics.record_expirations(self._name)
                return MISS
            return entry.value

    def contains_key(self, key: Hashable) -> bool:
        """Check whether a key is present and not expired. Never removes anything."""
        with self._lock.read_locked():
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self._time_fn())

    def cleanup_expired(self) -> int:
        """
        Remove every expired entry.

        Returns:
            The number of entries removed
        """
        with self._lock.write_locked():
            now = self._time_fn()
            expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired_keys:
                self._discard_entry(key)
            removed = len(expired_keys)
            self._expirations += removed

        metrics.record_expirations(self._name, removed)
        if removed:
            logger.info("Removed expired cache entries", cache=self._name, removed=removed)
        return removed

    def count_valid(self) -> int:
        """
        Count entries that have not expired.

        Unlike size(), expired entries awaiting removal are not counted.
        """
        with self._lock.read_locked():
            now = self._time_fn()
            return sum(1 for entry in self._entries.values() if not entry.is_expired(now))

    def get_remaining_ttl(self, key: Hashable) -> float:
        """
        Get the time left before a key expires.

        Args:
            key: The key to check

        Returns:
            Seconds until expiry, ``math.inf`` if the entry never expires,
            or 0.0 if the key is absent or expired
        """
        with self._lock.read_locked():
            entry = self._entries.get(key)
            now = self._time_fn()
            if entry is None or entry.is_expired(now):
                return 0.0
            return entry.remaining(now)

    def get_stats(self) -> CacheStats:
        """Get a snapshot of the usage counters."""
        with self._lock.read_locked():
            hit_rate = self._cache_hits / self._total_gets if self._total_gets else 0.0
            return CacheStats(
                total_puts=self._total_puts,
                total_gets=self._total_gets,
                cache_hits=self._cache_hits,
                cache_misses=self._cache_misses,
                expirations=self._expirations,
                hit_rate=hit_rate,
                size=self._size,
                capacity=self._capacity,
                strategy_name=self._policy.name,
            )

    def __repr__(self) -> str:
        with self._lock.read_locked():
            now = self._time_fn()
            parts = []
            for key, entry in self._entries.items():
                text = f"{key!r}={entry.value!r}"
                if entry.is_expired(now):
                    text += " [EXPIRED]"
                parts.append(text)
            return (
                f"TTLCache(capacity={self._capacity}, size={self._size}, "
                f"strategy={self._policy.name}, entries=[{', '.join(parts)}])"
            )
