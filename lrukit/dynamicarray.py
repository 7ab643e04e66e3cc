"""A fixed-capacity array that can be explicitly resized."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

__all__ = ["DynamicArray"]

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """An array whose length is its capacity; new slots hold ``None``.

    Indices are checked strictly: negative indices are not accepted.
    """

    __slots__ = ("_elements",)

    def __init__(self, size: int | None = None, items: Iterable[T] | None = None) -> None:
        if size is not None and size < 0:
            raise ValueError(f"invalid size {size}")
        if items is None:
            self._elements: list[T | None] = [None] * (size or 0)
            return
        elements = list(items)
        if size is not None:
            if size > len(elements):
                raise ValueError(f"{len(elements)} items given for size {size}")
            elements = elements[:size]
        self._elements = elements

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"index {index} out of range for capacity {len(self._elements)}")

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, keeping the leading elements that still fit."""
        if new_capacity < 0:
            raise ValueError(f"invalid capacity {new_capacity}")
        current = len(self._elements)
        if new_capacity <= current:
            del self._elements[new_capacity:]
        else:
            self._elements.extend([None] * (new_capacity - current))

    def swap(self, other: DynamicArray[T]) -> None:
        """Exchange contents with ``other``."""
        self._elements, other._elements = other._elements, self._elements

    def __getitem__(self, index: int) -> T | None:
        self._check(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._elements[index] = value

    def __delitem__(self, index: int) -> None:
        self._check(index)
        del self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T | None]:
        return iter(self._elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"DynamicArray({self._elements!r})"