"""Directed graphs in adjacency lists, and shortest paths on weight matrices."""

from __future__ import annotations

import heapq
import math
import re
from collections import deque
from collections.abc import Iterable, Sequence

INF = math.inf

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_neighbours(line: str) -> list[int]:
    """Read comma-separated vertex numbers; anything not positive is skipped."""
    found = []
    for token in line.split(","):
        match = _LEADING_INT.match(token)
        if match is not None:
            number = int(match.group(1))
            if number > 0:
                found.append(number)
    return found


class Digraph:
    """A directed graph whose vertices are numbered from 1 in insertion order."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._adjacent: list[list[int]] = []

    @classmethod
    def read_file(cls, path) -> Digraph:
        """Load a graph from a file of name lines each followed by a neighbour line."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Digraph:
        """Build a graph from alternating name and comma-separated neighbour lines."""
        graph = cls()
        rows = iter(lines)
        for name_line in rows:
            neighbour_line = next(rows, "")
            graph.add_vertex(name_line.rstrip("\r\n"), _parse_neighbours(neighbour_line))
        return graph

    def add_vertex(self, name: str, neighbours: Iterable[int] = ()) -> int:
        """Add a vertex with edges to the given vertex numbers; return its number."""
        targets = list(neighbours)
        if any(no < 1 for no in targets):
            raise ValueError("vertex numbers start at 1")
        self._names.append(name)
        self._adjacent.append(targets)
        return len(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def _check(self, no: int) -> None:
        if not 1 <= no <= len(self._names):
            raise IndexError(f"no vertex {no}")

    def dfs(self, start: int = 1) -> list[str]:
        """Return vertex names in depth-first order from start."""
        self._check(start)
        visited: set[int] = set()
        order: list[str] = []
        stack = [iter([start])]
        while stack:
            no = next(stack[-1], None)
            if no is None:
                stack.pop()
                continue
            if no in visited:
                continue
            self._check(no)
            visited.add(no)
            order.append(self._names[no - 1])
            stack.append(iter(self._adjacent[no - 1]))
        return order

    def bfs(self, start: int = 1) -> list[str]:
        """Return vertex names in breadth-first order from start."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[str] = []
        while queue:
            current = queue.popleft()
            order.append(self._names[current - 1])
            for no in self._adjacent[current - 1]:
                self._check(no)
                if no not in visited:
                    visited.add(no)
                    queue.append(no)
        return order

    def shortest_path(self, start: int, end: int) -> list[str] | None:
        """Return the names on a path with fewest edges, or None if end is unreachable."""
        self._check(start)
        self._check(end)
        visited = {start}
        previous: dict[int, int] = {}
        queue = deque([start])
        while queue:
            current = queue[0]
            if current == end:
                break
            queue.popleft()
            for no in self._adjacent[current - 1]:
                self._check(no)
                if no not in visited:
                    visited.add(no)
                    previous[no] = current
                    queue.append(no)
        if not queue:
            return None
        path = [end]
        while path[-1] != start:
            path.append(previous[path[-1]])
        return [self._names[no - 1] for no in reversed(path)]


def _square(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    matrix = [list(row) for row in graph]
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("the weight matrix must be square")
    return matrix


def dijkstra(graph: Sequence[Sequence[float]], start: int) -> list[float]:
    """Return the shortest distance from start to every vertex.

    graph is a weight matrix in which INF marks a missing edge.
    """
    matrix = _square(graph)
    size = len(matrix)
    if not 0 <= start < size:
        raise IndexError(f"no vertex {start}")
    dist = list(matrix[start])
    used = [False] * size
    used[start] = True
    heap = [(weight, i) for i, weight in enumerate(matrix[start]) if i != start]
    heapq.heapify(heap)
    while heap:
        best, k = heapq.heappop(heap)
        if best == INF:
            break
        if used[k]:
            continue
        used[k] = True
        for j, weight in enumerate(matrix[k]):
            if not used[j] and best + weight < dist[j]:
                dist[j] = best + weight
                heapq.heappush(heap, (dist[j], j))
    return dist


def floyd(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    dist = _square(graph)
    for k, via in enumerate(dist):
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, onward in enumerate(via):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist