"""Stacks built from queues, and a queue built from a stack."""

from __future__ import annotations

from collections import deque
from typing import Any

from dskit.bounded_queue import BoundedQueue, QueueEmptyError
from dskit.stack import Stack, StackEmptyError


class RotatingQueueStack:
    """LIFO stack backed by a single bounded queue.

    Popping rotates all but the newest item to the back of the queue and
    then removes the item left at the front.
    """

    def __init__(self, size: int) -> None:
        self._queue = BoundedQueue(size)

    def push(self, item: Any) -> Any:
        """Put ``item`` on top of the stack and return it."""
        return self._queue.add(item)

    def pop(self) -> Any:
        """Remove and return the most recently pushed item."""
        if not self._queue:
            raise StackEmptyError("pop from empty stack")
        for _ in range(len(self._queue) - 1):
            self._queue.add(self._queue.delete())
        return self._queue.delete()

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._queue)!r})"


class TwoQueueStack:
    """LIFO stack backed by a bounded queue and an auxiliary one used when popping."""

    def __init__(self, size: int) -> None:
        self._queue = BoundedQueue(size)

    def push(self, item: Any) -> Any:
        """Put ``item`` on top of the stack and return it."""
        return self._queue.add(item)

    def pop(self) -> Any:
        """Remove and return the most recently pushed item."""
        if not self._queue:
            raise StackEmptyError("pop from empty stack")
        spare = BoundedQueue(self._queue.size)
        for _ in range(len(self._queue) - 1):
            spare.add(self._queue.delete())
        top = self._queue.delete()
        self._queue = spare
        return top

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._queue)!r})"


class StackQueue:
    """FIFO queue backed by a stack, using a temporary stack to reach the bottom."""

    def __init__(self) -> None:
        self._stack = Stack()

    def add(self, item: Any) -> None:
        """Append ``item`` at the back of the queue."""
        self._stack.push(item)

    def delete(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if not self._stack:
            raise QueueEmptyError("delete from empty queue")
        spare = Stack()
        while len(self._stack) > 1:
            spare.push(self._stack.pop())
        front = self._stack.pop()
        while spare:
            self._stack.push(spare.pop())
        return front

    def search(self, item: Any) -> bool:
        """Return whether ``item`` is queued; the queue is left unchanged."""
        spare = Stack()
        found = False
        while self._stack:
            current = self._stack.pop()
            spare.push(current)
            if current == item:
                found = True
                break
        while spare:
            self._stack.push(spare.pop())
        return found

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(reversed(list(self._stack)))!r})"


def stack_contains(stack: Stack, item: Any) -> bool:
    """Return whether ``stack`` holds ``item``, restoring it to its original order."""
    held: deque[Any] = deque()
    found = False
    while stack:
        current = stack.pop()
        if current == item:
            stack.push(current)
            found = True
            break
        held.append(current)
    while held:
        stack.push(held.pop())
    return found