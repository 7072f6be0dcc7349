"""A binary search tree of distinct, ordered values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class DuplicateKeyError(ValueError):
    """Raised when adding a value the tree already holds."""


class KeyNotFoundError(KeyError):
    """Raised when a requested value is not in the tree."""


class EmptyTreeError(ValueError):
    """Raised when an operation needs a non-empty tree."""


@dataclass(eq=False)
class Node:
    """A tree node holding one value and its two subtrees."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree; smaller values go left, larger go right."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"

    def add(self, value: Any) -> Node:
        """Insert ``value`` and return its new node."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            if value == node.value:
                raise DuplicateKeyError(f"{value!r} is already in the tree")
            parent = node
            node = node.left if value < node.value else node.right
        new_node = Node(value)
        if parent is None:
            self.root = new_node
        elif value < parent.value:
            parent.left = new_node
        else:
            parent.right = new_node
        self._length += 1
        return new_node

    def search(self, value: Any) -> Node:
        """Return the node holding ``value``."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        raise KeyNotFoundError(value)

    def delete(self, value: Any) -> Any:
        """Remove ``value`` from the tree and return it.

        A node with two children takes the smallest value of its right
        subtree, and that node is removed instead.
        """
        parent: Optional[Node] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyNotFoundError(value)
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._length -= 1
        return value

    @staticmethod
    def _in_order(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._in_order(node.left)
            yield node.value
            yield from BinarySearchTree._in_order(node.right)

    @staticmethod
    def _pre_order(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield node.value
            yield from BinarySearchTree._pre_order(node.left)
            yield from BinarySearchTree._pre_order(node.right)

    @staticmethod
    def _post_order(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._post_order(node.left)
            yield from BinarySearchTree._post_order(node.right)
            yield node.value

    @staticmethod
    def _reverse_order(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._reverse_order(node.right)
            yield node.value
            yield from BinarySearchTree._reverse_order(node.left)

    def in_order(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(self._in_order(self.root))

    def pre_order(self) -> list[Any]:
        """Return the values with each node before its subtrees."""
        return list(self._pre_order(self.root))

    def post_order(self) -> list[Any]:
        """Return the values with each node after its subtrees."""
        return list(self._post_order(self.root))

    def level_order(self) -> list[Any]:
        """Return the values level by level, left to right."""
        values: list[Any] = []
        pending: deque[Node] = deque([self.root] if self.root is not None else [])
        while pending:
            node = pending.popleft()
            values.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return values

    def descending(self) -> list[Any]:
        """Return the values in descending order."""
        return list(self._reverse_order(self.root))

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""

        def measure(node: Optional[Node]) -> int:
            if node is None:
                return 0
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def count_leaves(self) -> int:
        """Return the number of nodes without children."""

        def count(node: Optional[Node]) -> int:
            if node is None:
                return 0
            if node.left is None and node.right is None:
                return 1
            return count(node.left) + count(node.right)

        return count(self.root)

    def min(self) -> Node:
        """Return the node holding the smallest value."""
        node = self.root
        if node is None:
            raise EmptyTreeError("min of empty tree")
        while node.left is not None:
            node = node.left
        return node

    def max(self) -> Node:
        """Return the node holding the largest value."""
        node = self.root
        if node is None:
            raise EmptyTreeError("max of empty tree")
        while node.right is not None:
            node = node.right
        return node