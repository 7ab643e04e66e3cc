"""Array-backed sequences in a mutable and an immutable flavour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import islice
from typing import Any, Generic, Iterable, Iterator, TypeVar

from .dynamicarray import DynamicArray

__all__ = ["ArraySequence", "MutableArraySequence", "ImmutableArraySequence"]

T = TypeVar("T")


class ArraySequence(ABC, Generic[T]):
    """A sequence stored in a :class:`DynamicArray` with spare capacity.

    Operations that change the sequence return the sequence that holds the
    result: the sequence itself for the mutable flavour, a modified copy for
    the immutable one.  Indices are checked strictly; negative indices are
    not accepted.
    """

    def __init__(self, items: Iterable[T] | None = None, size: int | None = None) -> None:
        self._array: DynamicArray[T] = DynamicArray(size, items)
        self._size = len(self._array)

    @abstractmethod
    def _instance(self) -> ArraySequence[T]:
        """The sequence that a modifying operation works on."""

    def _copy(self) -> ArraySequence[T]:
        duplicate = type(self).__new__(type(self))
        duplicate._array = DynamicArray(items=self._array)
        duplicate._size = self._size
        return duplicate

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for length {self._size}")

    def _grow_if_full(self) -> None:
        capacity = len(self._array)
        if self._size == capacity:
            self._array.resize(1 if capacity == 0 else capacity * 2)

    def _push(self, item: T) -> None:
        self._grow_if_full()
        self._size += 1
        self._array[self._size - 1] = item

    def _insert(self, index: int, item: T) -> None:
        values = list(self)
        values.insert(index, item)
        self._grow_if_full()
        for position, value in enumerate(values):
            self._array[position] = value
        self._size = len(values)

    def first(self) -> T:
        """The first element."""
        if not self._size:
            raise IndexError("first of an empty sequence")
        return self._array[0]

    def last(self) -> T:
        """The last element."""
        if not self._size:
            raise IndexError("last of an empty sequence")
        return self._array[self._size - 1]

    def capacity(self) -> int:
        """Number of slots in the backing array."""
        return len(self._array)

    def set(self, index: int, item: T) -> ArraySequence[T]:
        """Replace the element at ``index``."""
        self._check(index)
        result = self._instance()
        result._array[index] = item
        return result

    def append(self, item: T) -> ArraySequence[T]:
        """Add ``item`` at the end, doubling the capacity when full."""
        result = self._instance()
        result._push(item)
        return result

    def prepend(self, item: T) -> ArraySequence[T]:
        """Add ``item`` at the front."""
        result = self._instance()
        result._insert(0, item)
        return result

    def insert_at(self, item: T, index: int) -> ArraySequence[T]:
        """Insert ``item`` so that it ends up at ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for length {self._size}")
        result = self._instance()
        result._insert(index, item)
        return result

    def delete(self, index: int) -> ArraySequence[T]:
        """Remove the element at ``index``; the capacity shrinks by one."""
        self._check(index)
        result = self._instance()
        del result._array[index]
        result._size -= 1
        return result

    def subsequence(self, start: int, end: int) -> ArraySequence[T]:
        """New sequence of the elements from ``start`` up to, not including, ``end``."""
        if start < 0 or end < 0 or end > self._size or end < start:
            raise IndexError(f"invalid range [{start}, {end}) for length {self._size}")
        return type(self)(islice(self, start, end))

    def concat(self, other: Iterable[T]) -> ArraySequence[T]:
        """This sequence's elements followed by those of ``other``."""
        result = self._instance()
        for item in list(other):
            result._push(item)
        return result

    def new_sequence(self, size: int) -> ArraySequence[T]:
        """New sequence of the same kind with ``size`` empty slots."""
        return type(self)(size=size)

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._array[index]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return islice(self._array, self._size)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ArraySequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class MutableArraySequence(ArraySequence[T]):
    """A sequence that every operation changes in place."""

    def _instance(self) -> ArraySequence[T]:
        return self


class ImmutableArraySequence(ArraySequence[T]):
    """A sequence whose operations leave it unchanged and return a new one."""

    def _instance(self) -> ArraySequence[T]:
        return self._copy()