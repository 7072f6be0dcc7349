"""A binary max-heap."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class HeapEmptyError(IndexError):
    """Raised when taking from an empty heap."""


class MaxHeap:
    """Binary max-heap kept in a list; the largest value sits at the top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data = list(values)
        for parent in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(parent)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _sift_down(self, parent: int) -> None:
        data = self._data
        count = len(data)
        while True:
            child = 2 * parent + 1
            if child >= count:
                break
            if child + 1 < count and data[child + 1] > data[child]:
                child += 1
            if data[parent] >= data[child]:
                break
            data[parent], data[child] = data[child], data[parent]
            parent = child

    def _sift_up(self, child: int) -> None:
        data = self._data
        while child > 0:
            parent = (child - 1) // 2
            if data[parent] >= data[child]:
                break
            data[parent], data[child] = data[child], data[parent]
            child = parent

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._data:
            raise HeapEmptyError("peek at empty heap")
        return self._data[0]

    def add(self, value: Any) -> Any:
        """Insert ``value`` and return it."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)
        return value

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._data:
            raise HeapEmptyError("pop from empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return top

    def height(self) -> int:
        """Return the number of levels in the heap; 0 when empty."""
        return len(self._data).bit_length()

    def is_full(self) -> bool:
        """Return whether every level of the heap is completely filled."""
        count = len(self._data)
        return 2 ** self.height() == count + 1