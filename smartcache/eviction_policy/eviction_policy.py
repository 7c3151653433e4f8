"""Eviction policy definitions for in-memory cache."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Hashable

from smartcache.exceptions import PolicyAlreadyAttachedError


class EvictionPolicyType(str, Enum):
    """Enumeration of supported eviction policies."""

    LRU = "LRU"  # Least Recently Used
    FIFO = "FIFO"  # First In First Out
    LFU = "LFU"  # Least Frequently Used


class EvictionPolicy(ABC):
    """
    Abstract base class for eviction policies.

    A policy only keeps bookkeeping about keys and nominates the key to
    evict. It never sees values or the cache capacity. The owning cache
    calls the ``record_*`` hooks so that the tracked keys always match the
    keys stored in the cache, and calls them while holding its write lock,
    so implementations need no locking of their own.
    """

    def __init__(self):
        self._owner = None

    def attach(self, owner: Any) -> None:
        """
        Bind this policy to the cache that will drive it.

        Args:
            owner: The cache instance taking ownership

        Raises:
            PolicyAlreadyAttachedError: If another cache already owns this policy
        """
        if self._owner is not None and self._owner is not owner:
            raise PolicyAlreadyAttachedError(self)
        self._owner = owner

    @abstractmethod
    def record_insertion(self, key: Hashable) -> None:
        """
        Start tracking a key that was just added to the cache.

        Args:
            key: The inserted key
        """
        pass

    @abstractmethod
    def record_access(self, key: Hashable) -> None:
        """
        Note a read hit or an in-place update of a tracked key.

        Untracked keys are ignored.

        Args:
            key: The accessed key
        """
        pass

    @abstractmethod
    def record_removal(self, key: Hashable) -> None:
        """
        Stop tracking a key that has left the cache.

        Args:
            key: The removed key
        """
        pass

    @abstractmethod
    def select_eviction_candidate(self) -> Any:
        """
        Nominate a tracked key for eviction without changing any state.

        Returns:
            A tracked key, or ``MISS`` if nothing is tracked
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget every tracked key."""
        pass

    @property
    def name(self) -> str:
        """Identifier reported by the owning cache."""
        return type(self).__name__
