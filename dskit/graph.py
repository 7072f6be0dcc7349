"""A directed graph in adjacency-list form, with depth- and breadth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from typing import Optional, TextIO

SENTINEL = 9999
"""Value that ends a vertex's list of neighbours in graph input."""


class Graph:
    """Directed graph over vertices ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must not be negative, got {size}")
        self.size = size
        self._neighbours: list[list[int]] = [[] for _ in range(size)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, neighbours={self._neighbours!r})"

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise IndexError(f"vertex {vertex} out of range for graph of size {self.size}")

    def add_edge(self, vertex: int, neighbour: int) -> None:
        """Add an edge from ``vertex`` to ``neighbour``."""
        self._check(vertex)
        self._check(neighbour)
        self._neighbours[vertex].append(neighbour)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = [False] * self.size
        visited[start] = True
        order = [start]
        pending: list[Iterator[int]] = [iter(self._neighbours[start])]
        while pending:
            for neighbour in pending[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    pending.append(iter(self._neighbours[neighbour]))
                    break
            else:
                pending.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.size
        visited[start] = True
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._neighbours[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
        return order


def read_graph(stream: TextIO) -> Graph:
    """Read a graph: its size, then each vertex's neighbours ending with ``SENTINEL``."""
    try:
        numbers = iter([int(token) for token in stream.read().split()])
    except ValueError as exc:
        raise ValueError(f"graph input must be integers: {exc}") from exc
    size = next(numbers, None)
    if size is None:
        raise ValueError("graph input is empty")
    graph = Graph(size)
    for vertex in range(size):
        for neighbour in numbers:
            if neighbour == SENTINEL:
                break
            graph.add_edge(vertex, neighbour)
        else:
            raise ValueError(f"neighbours of vertex {vertex} are not terminated by {SENTINEL}")
    return graph


def main(argv: Optional[list[str]] = None) -> int:
    """Read a graph and print its depth-first and breadth-first traversals."""
    parser = argparse.ArgumentParser(description="Traverse a graph read from a file or standard input.")
    parser.add_argument("input", nargs="?", default="-", help="graph file, or - for standard input")
    parser.add_argument("--start", type=int, default=0, help="vertex to start from")
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            graph = read_graph(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as stream:
                graph = read_graph(stream)
        dfs_order = graph.dfs(args.start)
        bfs_order = graph.bfs(args.start)
    except (OSError, ValueError, IndexError) as exc:
        parser.error(str(exc))

    print("DFS: " + ",".join(map(str, dfs_order)))
    print("BFS: " + ",".join(map(str, bfs_order)))
    return 0