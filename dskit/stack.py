"""A last-in, first-out stack built on a singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dskit.slist import EmptyListError, SinglyLinkedList


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """LIFO stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._items = SinglyLinkedList()

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.add_head(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        try:
            return self._items.delete_head()
        except EmptyListError as exc:
            raise StackEmptyError("pop from empty stack") from exc

    def peek(self) -> Any:
        """Return the top item without removing it."""
        for item in self._items:
            return item
        raise StackEmptyError("peek at empty stack")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"