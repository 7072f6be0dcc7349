"""A doubly linked list with insertion before and after existing elements."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dskit import slist as _slist

__all__ = ["DoublyLinkedList", "ElementNotFoundError", "EmptyListError"]


class EmptyListError(_slist.EmptyListError):
    """Raised when an element is removed from an empty list."""


class ElementNotFoundError(_slist.ElementNotFoundError):
    """Raised when a reference element is not in the list."""


class _Node:
    __slots__ = ("prev", "data", "next")

    def __init__(self, data: Any, prev: Optional[_Node] = None, next: Optional[_Node] = None) -> None:
        self.prev = prev
        self.data = data
        self.next = next


class DoublyLinkedList:
    """Doubly linked list keeping references to both head and tail."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nodes_reversed(self) -> Iterator[_Node]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes_reversed())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def search(self, data: Any) -> int:
        """Return the index of the first occurrence of ``data``, or -1."""
        for index, item in enumerate(self):
            if item == data:
                return index
        return -1

    def add_head(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        node = _Node(data, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def add_tail(self, data: Any) -> None:
        """Append ``data`` at the back."""
        node = _Node(data, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def add_before(self, data: Any, before: Any) -> None:
        """Insert ``data`` just before the last occurrence of ``before``."""
        for node in self._nodes_reversed():
            if node.data == before:
                new_node = _Node(data, node.prev, node)
                if node.prev is None:
                    self._head = new_node
                else:
                    node.prev.next = new_node
                node.prev = new_node
                self._length += 1
                return
        raise ElementNotFoundError(f"{before!r} is not in the list")

    def add_after(self, data: Any, after: Any) -> None:
        """Insert ``data`` just after the first occurrence of ``after``."""
        for node in self._nodes():
            if node.data == after:
                new_node = _Node(data, node, node.next)
                if node.next is None:
                    self._tail = new_node
                else:
                    node.next.prev = new_node
                node.next = new_node
                self._length += 1
                return
        raise ElementNotFoundError(f"{after!r} is not in the list")

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1
        return node.data

    def delete_head(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("delete from empty list")
        return self._unlink(self._head)

    def delete_tail(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise EmptyListError("delete from empty list")
        return self._unlink(self._tail)

    def delete_before(self, data: Any) -> Any:
        """Remove and return the element just before the last occurrence of ``data`` that has one."""
        for node in self._nodes_reversed():
            if node.data == data and node.prev is not None:
                return self._unlink(node.prev)
        raise ElementNotFoundError(f"no element precedes {data!r}")