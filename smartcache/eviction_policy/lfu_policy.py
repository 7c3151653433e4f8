"""LFU (Least Frequently Used) eviction policy."""

import itertools
from typing import Any, Dict, Hashable

from smartcache.eviction_policy.eviction_policy import EvictionPolicy
from smartcache.sentinels import MISS


class AccessInfo:
    """Frequency and last-touch tick for one tracked key."""

    __slots__ = ("frequency", "last_access")

    def __init__(self, last_access: int):
        self.frequency = 1
        self.last_access = last_access

    def __repr__(self) -> str:
        return f"AccessInfo(frequency={self.frequency}, last_access={self.last_access})"


class LFUPolicy(EvictionPolicy):
    """
    LFU (Least Frequently Used) eviction policy.

    Each key starts with frequency 1 and gains one per access. The
    candidate is the key with the lowest frequency; ties go to the key
    touched least recently. Touch order comes from a monotonically
    increasing tick rather than a clock, so ties are never ambiguous.

    Candidate selection scans every tracked key (O(n)); it only runs when
    an insertion overflows the cache. Everything else is O(1).
    """

    def __init__(self):
        super().__init__()
        self._access_info: Dict[Hashable, AccessInfo] = {}
        self._ticks = itertools.count()

    def record_insertion(self, key: Hashable) -> None:
        self._access_info[key] = AccessInfo(next(self._ticks))

    def record_access(self, key: Hashable) -> None:
        info = self._access_info.get(key)
        if info is None:
            return
        info.frequency += 1
        info.last_access = next(self._ticks)

    def record_removal(self, key: Hashable) -> None:
        self._access_info.pop(key, None)

    def select_eviction_candidate(self) -> Any:
        candidate = MISS
        best = None
        for key, info in self._access_info.items():
            rank = (info.frequency, info.last_access)
            if best is None or rank < best:
                candidate = key
                best = rank
        return candidate

    def frequency(self, key: Hashable) -> int:
        """
        Get the access count of a key.

        Args:
            key: The key to look up

        Returns:
            The frequency, or 0 if the key is not tracked
        """
        info = self._access_info.get(key)
        return info.frequency if info else 0

    def clear(self) -> None:
        self._access_info.clear()

    def __len__(self) -> int:
        return len(self._access_info)
