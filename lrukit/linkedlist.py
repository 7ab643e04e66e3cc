"""A doubly linked list whose nodes can be held on to and erased directly."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

__all__ = ["ListNode", "LinkedList"]

T = TypeVar("T")


class ListNode(Generic[T]):
    """One element of a :class:`LinkedList` with links to its neighbours."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: ListNode[T] | None = None
        self.next: ListNode[T] | None = None
        self._owner: LinkedList[T] | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList(Generic[T]):
    """A doubly linked list with O(1) append, prepend and erase by node."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: ListNode[T] | None = None
        self._tail: ListNode[T] | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def _new_node(self, item: T) -> ListNode[T]:
        node = ListNode(item)
        node._owner = self
        return node

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for length {self._size}")

    def _node_at(self, index: int) -> ListNode[T]:
        self._check_index(index)
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _unlink(self, node: ListNode[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1

    def append(self, item: T) -> ListNode[T]:
        """Add ``item`` at the end and return its node."""
        node = self._new_node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def prepend(self, item: T) -> ListNode[T]:
        """Add ``item`` at the front and return its node."""
        if self._head is None:
            return self.append(item)
        node = self._new_node(item)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def insert_at(self, item: T, index: int) -> ListNode[T]:
        """Insert ``item`` right after the element at ``index - 1``.

        ``index`` must name an existing element; an index of 0 inserts
        after the first element, like an index of 1.
        """
        self._check_index(index)
        anchor = self._node_at(max(index - 1, 0))
        node = self._new_node(item)
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1
        return node

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._unlink(self._node_at(index))

    def pop_first(self) -> None:
        """Remove the first element; do nothing if the list is empty."""
        if self._size:
            self.remove(0)

    def erase(self, node: ListNode[T] | None) -> ListNode[T] | None:
        """Remove ``node`` from the list and return the node that followed it."""
        if self._head is None or self._tail is None:
            raise IndexError("erase from an empty list")
        if node is None:
            raise IndexError("cannot erase past the end")
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        following = node.next
        self._unlink(node)
        return following

    def first(self) -> T:
        """Value of the first element."""
        if self._head is None:
            raise IndexError("first of an empty list")
        return self._head.value

    def last(self) -> T:
        """Value of the last element."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.value

    def head(self) -> ListNode[T] | None:
        """The first node, or ``None`` when empty."""
        return self._head

    def tail(self) -> ListNode[T] | None:
        """The last node, or ``None`` when empty."""
        return self._tail

    def nodes(self) -> Iterator[ListNode[T]]:
        """Iterate over the nodes from front to back."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def sublist(self, start: int, end: int) -> LinkedList[T]:
        """New list of the elements from ``start`` up to, not including, ``end``.

        ``end`` must be smaller than the length of the list.
        """
        if start < 0 or end < 0 or end >= self._size or end < start:
            raise IndexError(f"invalid range [{start}, {end}) for length {self._size}")
        result: LinkedList[T] = LinkedList()
        for position, value in enumerate(self):
            if position >= end:
                break
            if position >= start:
                result.append(value)
        return result

    def concat(self, other: LinkedList[T]) -> LinkedList[T]:
        """New list holding this list's elements followed by ``other``'s."""
        result: LinkedList[T] = LinkedList(self)
        for value in other:
            result.append(value)
        return result

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __setitem__(self, index: int, item: T) -> None:
        self._node_at(index).value = item

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"