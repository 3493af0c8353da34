"""Disjoint sets and their uses: Kruskal, relatives and the best route."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterable
from operator import attrgetter
from typing import NamedTuple


class UnionFind:
    """Disjoint sets over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"no element {x}")

    def find(self, x: int) -> int:
        """Return the root of x's set, pointing every visited element at it."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        else:
            if self._rank[x] == self._rank[y]:
                self._rank[y] += 1
            self._parent[x] = y
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)


class Edge(NamedTuple):
    """A weighted edge between two vertices."""

    start: Hashable
    end: Hashable
    cost: int


def kruskal(edges: Iterable) -> list[Edge]:
    """Return the edges of a minimum spanning forest, cheapest first.

    Edges of equal cost are tried in the order given.
    """
    ordered = sorted((Edge._make(edge) for edge in edges), key=attrgetter("cost"))
    labels: dict[Hashable, int] = {}
    for edge in ordered:
        labels.setdefault(edge.start, len(labels))
        labels.setdefault(edge.end, len(labels))
    sets = UnionFind(len(labels))
    return [edge for edge in ordered if sets.union(labels[edge.start], labels[edge.end])]


def relatives(
    people: int, pairs: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """Answer, for people numbered 1..people, whether each queried pair is related."""
    sets = UnionFind(people + 1)
    for x, y in pairs:
        sets.union(x, y)
    return [sets.connected(x, y) for x, y in queries]


def best_route(
    vertices: int, roads: Iterable, start: int, target: int
) -> int | None:
    """Return the smallest possible largest road weight on a route start..target.

    Roads are (u, v, w) triples over vertices numbered up to vertices.
    Returns None when no route exists.
    """
    sets = UnionFind(vertices + 1)
    for road in sorted((Edge._make(road) for road in roads), key=attrgetter("cost")):
        sets.union(road.start, road.end)
        if sets.connected(start, target):
            return road.cost
    return None


def main(argv: list[str] | None = None) -> int:
    """Read "n m s t" and m roads "u v w"; print the best route's largest weight."""
    parser = argparse.ArgumentParser(
        description="Find the route whose busiest road is least busy."
    )
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=sys.stdin,
        help="file to read (standard input by default)",
    )
    args = parser.parse_args(argv)
    try:
        numbers = [int(token) for token in args.input.read().split()]
        vertices, count, start, target = numbers[:4]
        body = numbers[4:4 + 3 * count]
        if len(body) != 3 * count:
            raise ValueError("too few roads")
    except ValueError as exc:
        print(f"malformed input: {exc}", file=sys.stderr)
        return 1
    roads = zip(body[0::3], body[1::3], body[2::3])
    try:
        answer = best_route(vertices, roads, start, target)
    except IndexError as exc:
        print(f"malformed input: {exc}", file=sys.stderr)
        return 1
    if answer is None:
        print("no route", file=sys.stderr)
        return 1
    print(answer)
    return 0