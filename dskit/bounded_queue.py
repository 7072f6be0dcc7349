"""A first-in, first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

MAX_SIZE = 50
"""Largest capacity a queue may have; larger requests are capped to it."""


class QueueFullError(Exception):
    """Raised when adding to a queue that is already at capacity."""


class QueueEmptyError(IndexError):
    """Raised when deleting from an empty queue."""


class BoundedQueue:
    """FIFO queue holding at most ``size`` items (capped at ``MAX_SIZE``)."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"queue size must not be negative, got {size}")
        self.size = min(size, MAX_SIZE)
        self._items: deque[Any] = deque()

    def add(self, item: Any) -> Any:
        """Append ``item`` at the back of the queue and return it."""
        if len(self._items) >= self.size:
            raise QueueFullError(f"queue is full (capacity {self.size})")
        self._items.append(item)
        return item

    def delete(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise QueueEmptyError("delete from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self._items)!r})"