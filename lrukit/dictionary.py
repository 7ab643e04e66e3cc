"""A separately chained hash dictionary with explicit load-factor control."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from .dynamicarray import DynamicArray
from .linkedlist import LinkedList, ListNode

__all__ = ["HashDictionary", "fill_random", "INT_MAX"]

K = TypeVar("K")
V = TypeVar("V")

INT_MAX = 2**31 - 1


@dataclass(slots=True)
class _Entry(Generic[K, V]):
    key: K
    value: V


def _empty_buckets(count: int) -> DynamicArray[LinkedList[_Entry]]:
    return DynamicArray(items=(LinkedList() for _ in range(count)))


class HashDictionary(Generic[K, V]):
    """A hash map whose buckets are linked lists.

    The table grows by ``increase_factor`` (plus one slot) once the number
    of entries exceeds ``fill_factor`` times the capacity, and shrinks by the
    same factor when it drops below ``fill_factor / increase_factor`` of it.
    """

    def __init__(
        self,
        hash_function: Callable[[K], int],
        fill_factor: float = 0.7,
        increase_factor: float = 2.0,
        capacity: int = 0,
    ) -> None:
        if (
            increase_factor <= 1
            or fill_factor > 1
            or fill_factor <= 0
            or capacity < 0
            or hash_function is None
        ):
            raise ValueError("invalid dictionary parameters")
        self._hash = hash_function
        self._fill_factor = fill_factor
        self._increase_factor = increase_factor
        self._buckets: DynamicArray[LinkedList[_Entry]] = _empty_buckets(capacity)
        self._size = 0

    def _bucket(self, key: K) -> LinkedList[_Entry]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def _find(self, key: K) -> ListNode[_Entry] | None:
        if len(self._buckets) == 0:
            return None
        for node in self._bucket(key).nodes():
            if node.value.key == key:
                return node
        return None

    def _needs_growth(self) -> bool:
        return self._size > self._fill_factor * len(self._buckets)

    def _needs_shrink(self) -> bool:
        return self._size < self._fill_factor * len(self._buckets) / self._increase_factor

    def _rebuild(self, new_capacity: int) -> None:
        fresh = _empty_buckets(new_capacity)
        for key, value in self.items():
            fresh[self._hash(key) % new_capacity].append(_Entry(key, value))
        self._buckets.swap(fresh)

    def add(self, key: K, value: V) -> None:
        """Insert a new entry; a key that is already present raises ``ValueError``."""
        if len(self._buckets) == 0:
            self._buckets.resize(1)
            self._buckets[0] = LinkedList()
        if key in self:
            raise ValueError(f"an entry with key {key!r} already exists")
        self._bucket(key).append(_Entry(key, value))
        self._size += 1
        if self._needs_growth():
            capacity = len(self._buckets)
            if capacity > INT_MAX / self._increase_factor:
                raise OverflowError("cannot grow the dictionary any further")
            self._rebuild(int(capacity * self._increase_factor + 1))

    def remove(self, key: K) -> None:
        """Delete the entry for ``key``; raise ``KeyError`` if there is none."""
        if len(self._buckets) == 0:
            raise KeyError("dictionary is empty")
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        self._bucket(key).erase(node)
        self._size -= 1
        if self._needs_shrink():
            self._rebuild(int(len(self._buckets) / self._increase_factor))

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: K) -> V:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value.value

    def __setitem__(self, key: K, value: V) -> None:
        node = self._find(key)
        if node is None:
            self.add(key, value)
        else:
            node.value.value = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def capacity(self) -> int:
        """Number of buckets in the table."""
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"HashDictionary({dict(self.items())!r})"


def fill_random(
    size: int,
    dictionary: HashDictionary[int, int],
    rng: random.Random | None = None,
) -> HashDictionary[int, int]:
    """Add ``size`` new random non-negative integers, each mapped to itself."""
    generator = rng if rng is not None else random.Random()
    added = 0
    while added < size:
        number = generator.randint(0, INT_MAX)
        if number in dictionary:
            continue
        dictionary.add(number, number)
        added += 1
    return dictionary