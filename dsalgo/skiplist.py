"""A skip list of ordered, distinct values."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "down")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: _Node | None = None
        self.down: _Node | None = None


class SkipList:
    """Layered sorted linked lists; each value reaches a coin-flipped height.

    The list grows by at most one level per insertion.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._heads: list[_Node] = [_Node()]  # top level first

    def _random_level(self) -> int:
        level = 1
        while self._rng.getrandbits(1) == 1:
            level += 1
        return level

    def __contains__(self, value: Any) -> bool:
        pre: _Node | None = self._heads[0]
        while pre is not None:
            while pre.next is not None and pre.next.value < value:
                pre = pre.next
            if pre.next is not None and pre.next.value == value:
                return True
            pre = pre.down
        return False

    def add(self, value: Any) -> None:
        """Insert value unless it is already present."""
        if value in self:
            return
        level = self._random_level()
        if level > len(self._heads):
            level = len(self._heads) + 1
            head = _Node()
            head.down = self._heads[0]
            self._heads.insert(0, head)

        nodes = [_Node(value) for _ in range(level)]
        for upper, lower in zip(nodes, nodes[1:]):
            upper.down = lower

        pre: _Node | None = self._heads[len(self._heads) - level]
        for node in nodes:
            while pre.next is not None and pre.next.value < value:
                pre = pre.next
            node.next = pre.next
            pre.next = node
            pre = pre.down

    def remove(self, value: Any) -> None:
        """Remove value from every level; empty top levels are dropped."""
        pre: _Node | None = self._heads[0]
        while pre is not None:
            while pre.next is not None and pre.next.value < value:
                pre = pre.next
            if pre.next is not None and pre.next.value == value:
                pre.next = pre.next.next
            pre = pre.down
        while len(self._heads) > 1 and self._heads[0].next is None:
            self._heads.pop(0)

    def __iter__(self) -> Iterator[Any]:
        cur = self._heads[-1].next
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def levels(self) -> list[list[Any]]:
        """Return the values of every level, top level first."""
        result = []
        for head in self._heads:
            row = []
            cur = head.next
            while cur is not None:
                row.append(cur.value)
                cur = cur.next
            result.append(row)
        return result