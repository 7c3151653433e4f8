"""Index-linked ordering structure shared by the LRU and FIFO policies."""

from typing import Any, Dict, Hashable, List

from smartcache.sentinels import MISS

# Slot 0 is the sentinel: _next[0] is the head (newest), _prev[0] the tail (oldest).
_SENTINEL = 0


class IndexedOrderList:
    """
    Doubly linked list of keys stored in parallel arrays.

    Nodes are addressed by slot index instead of by object reference, and a
    dict maps each key to its slot, so insert, move-to-head, removal and
    tail lookup are all O(1). Freed slots are reused.
    """

    def __init__(self):
        self._keys: List[Any] = [None]
        self._prev: List[int] = [_SENTINEL]
        self._next: List[int] = [_SENTINEL]
        self._index: Dict[Hashable, int] = {}
        self._free: List[int] = []

    def add_to_head(self, key: Hashable) -> None:
        """
        Add a key at the head of the list (newest position).

        If the key is already present it is moved to the head instead.

        Args:
            key: The key to add
        """
        slot = self._index.get(key)
        if slot is not None:
            self._move_slot_to_head(slot)
            return

        slot = self._allocate(key)
        self._index[key] = slot
        self._link_after_sentinel(slot)

    def move_to_head(self, key: Hashable) -> None:
        """
        Move a key to the head of the list.

        Keys that are not in the list are ignored.

        Args:
            key: The key to move
        """
        slot = self._index.get(key)
        if slot is not None:
            self._move_slot_to_head(slot)

    def remove(self, key: Hashable) -> bool:
        """
        Remove a key from the list.

        Args:
            key: The key to remove

        Returns:
            True if the key was present
        """
        slot = self._index.pop(key, None)
        if slot is None:
            return False

        self._unlink(slot)
        self._keys[slot] = None
        self._free.append(slot)
        return True

    def tail(self) -> Any:
        """
        Get the oldest key without removing it.

        Returns:
            The key at the tail, or ``MISS`` if the list is empty
        """
        slot = self._prev[_SENTINEL]
        if slot == _SENTINEL:
            return MISS
        return self._keys[slot]

    def clear(self) -> None:
        self._keys = [None]
        self._prev = [_SENTINEL]
        self._next = [_SENTINEL]
        self._index.clear()
        self._free.clear()

    def __len__(self) -> int:
        return len(self._index)

    def _allocate(self, key: Hashable) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            return slot

        self._keys.append(key)
        self._prev.append(_SENTINEL)
        self._next.append(_SENTINEL)
        return len(self._keys) - 1

    def _move_slot_to_head(self, slot: int) -> None:
        if self._next[_SENTINEL] == slot:
            return
        self._unlink(slot)
        self._link_after_sentinel(slot)

    def _link_after_sentinel(self, slot: int) -> None:
        first = self._next[_SENTINEL]
        self._prev[slot] = _SENTINEL
        self._next[slot] = first
        self._prev[first] = slot
        self._next[_SENTINEL] = slot

    def _unlink(self, slot: int) -> None:
        prev_slot = self._prev[slot]
        next_slot = self._next[slot]
        self._next[prev_slot] = next_slot
        self._prev[next_slot] = prev_slot
