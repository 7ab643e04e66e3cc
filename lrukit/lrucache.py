"""A least-recently-used cache in front of a loader function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .dictionary import HashDictionary
from .linkedlist import LinkedList, ListNode

__all__ = ["CacheResult", "LRUCache"]

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class CacheResult(Generic[V]):
    """A value returned by the cache and whether it came from the cache."""

    value: V
    hit: bool


@dataclass(slots=True)
class _Slot(Generic[K, V]):
    value: V
    node: ListNode[K]


class LRUCache(Generic[K, V]):
    """Cache of at most ``capacity`` values produced by ``loader``.

    ``loader(key)`` returns the value for ``key`` or raises (for instance
    ``KeyError``) when there is none; a failed load leaves the cache as it was.
    """

    def __init__(
        self,
        loader: Callable[[K], V],
        capacity: int,
        hash_function: Callable[[K], int],
    ) -> None:
        self._loader = loader
        self._history: LinkedList[K] = LinkedList()
        self._entries: HashDictionary[K, _Slot] = HashDictionary(
            hash_function, 1, 2, capacity
        )
        if capacity == 0:
            raise ValueError("invalid capacity")
        self._capacity = capacity

    def get(self, key: K) -> CacheResult[V]:
        """Return the value for ``key``, loading and caching it on a miss."""
        if key in self._entries:
            slot = self._entries[key]
            self._history.erase(slot.node)
            slot.node = self._history.append(key)
            return CacheResult(slot.value, True)

        value = self._loader(key)

        if len(self._history) == self._capacity:
            self._entries.remove(self._history.first())
            self._history.pop_first()

        node = self._history.append(key)
        self._entries.add(key, _Slot(value, node))
        return CacheResult(value, False)

    def keys(self) -> list[K]:
        """Cached keys from least to most recently used."""
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def __contains__(self, key: object) -> bool:
        return key in self._entries