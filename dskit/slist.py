"""A singly linked list with head and tail access."""

from __future__ import annotations

import builtins
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Any, Optional


class EmptyListError(IndexError):
    """Raised when an operation needs at least one element."""


class ElementNotFoundError(ValueError):
    """Raised when a requested element is not in the list."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next


class SinglyLinkedList:
    """Singly linked list keeping references to both head and tail."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for item in items:
            self.add_tail(item)

    def __len__(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def lookup(self, data: Any) -> int:
        """Return the index of the first occurrence of ``data``, or -1."""
        for index, item in enumerate(self):
            if item == data:
                return index
        return -1

    def add_head(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        node = _Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def add_tail(self, data: Any) -> None:
        """Append ``data`` at the back."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def delete_head(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def delete_tail(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise EmptyListError("delete from empty list")
        if self._head is self._tail:
            return self.delete_head()
        prev = self._head
        while prev.next is not self._tail:
            prev = prev.next
        data = self._tail.data
        prev.next = None
        self._tail = prev
        self._length -= 1
        return data

    def max(self) -> Any:
        """Return the largest element."""
        if self._head is None:
            raise EmptyListError("max of empty list")
        return builtins.max(self)

    def min(self) -> Any:
        """Return the smallest element."""
        if self._head is None:
            raise EmptyListError("min of empty list")
        return builtins.min(self)

    def add_after(self, data: Any, after: Any) -> None:
        """Insert ``data`` right after the first occurrence of ``after``."""
        for node in self._nodes():
            if node.data == after:
                new_node = _Node(data, node.next)
                node.next = new_node
                if node is self._tail:
                    self._tail = new_node
                self._length += 1
                return
        raise ElementNotFoundError(f"{after!r} is not in the list")

    def delete(self, data: Any) -> Any:
        """Remove the first occurrence of ``data`` and return it."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == data:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                if node is self._tail:
                    self._tail = prev
                self._length -= 1
                return node.data
            prev = node
        raise ElementNotFoundError(f"{data!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head, self._tail = self._tail, self._head

    def union(self, other: SinglyLinkedList) -> SinglyLinkedList:
        """Return a new list with the elements of this list followed by ``other``'s."""
        return SinglyLinkedList(chain(self, other))

    def intersection(self, other: SinglyLinkedList) -> SinglyLinkedList:
        """Return a new list of the distinct elements also found in ``other``, in this list's order."""
        result = SinglyLinkedList()
        for item in self:
            if other.lookup(item) != -1:
                result.add_tail_unique(item)
        return result

    def add_head_unique(self, data: Any) -> bool:
        """Insert ``data`` at the front unless present; return whether it was added."""
        if self.lookup(data) != -1:
            return False
        self.add_head(data)
        return True

    def add_tail_unique(self, data: Any) -> bool:
        """Append ``data`` unless present; return whether it was added."""
        if self.lookup(data) != -1:
            return False
        self.add_tail(data)
        return True

    def add_after_unique(self, data: Any, after: Any) -> bool:
        """Insert ``data`` after ``after`` unless present; return whether it was added."""
        if self.lookup(data) != -1:
            return False
        self.add_after(data, after)
        return True