"""A binary search tree with an injectable ordering and classic tree problems."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding a value and two children."""

    value: Any
    left: Node | None = None
    right: Node | None = None


class BSTree:
    """A binary search tree ordered by a `less(a, b)` predicate.

    Equal values (by ``==``) are never stored twice.
    """

    def __init__(self, less: Callable[[Any, Any], bool] = operator.lt) -> None:
        self.root: Node | None = None
        self._less = less

    @classmethod
    def from_traversals(cls, preorder: Sequence, inorder: Sequence) -> BSTree:
        """Rebuild a tree from its preorder and inorder sequences."""

        def build(pre: Sequence, ino: Sequence) -> Node | None:
            if not pre or not ino:
                return None
            node = Node(pre[0])
            for k, value in enumerate(ino):
                if value == pre[0]:
                    node.left = build(pre[1:k + 1], ino[:k])
                    node.right = build(pre[k + 1:], ino[k + 1:])
                    break
            return node

        tree = cls()
        tree.root = build(list(preorder), list(inorder))
        return tree

    def insert(self, value: Any) -> None:
        """Insert value unless an equal value is already present."""
        if self.root is None:
            self.root = Node(value)
            return
        parent = None
        cur = self.root
        while cur is not None:
            if cur.value == value:
                return
            parent = cur
            cur = cur.right if self._less(cur.value, value) else cur.left
        if self._less(value, parent.value):
            parent.left = Node(value)
        else:
            parent.right = Node(value)

    def remove(self, value: Any) -> None:
        """Remove value if present; a node with two children takes its predecessor."""
        parent = None
        cur = self.root
        while cur is not None and cur.value != value:
            parent = cur
            cur = cur.right if self._less(cur.value, value) else cur.left
        if cur is None:
            return

        if cur.left is not None and cur.right is not None:
            parent = cur
            pre = cur.left
            while pre.right is not None:
                parent = pre
                pre = pre.right
            cur.value = pre.value
            cur = pre

        child = cur.left if cur.left is not None else cur.right
        if parent is None:
            self.root = child
        elif parent.left is cur:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, value: Any) -> bool:
        cur = self.root
        while cur is not None:
            if cur.value == value:
                return True
            cur = cur.right if self._less(cur.value, value) else cur.left
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self.preorder())

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def preorder(self) -> Iterator[Any]:
        """Yield values node, left, right."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder_nodes(self, reverse: bool = False) -> Iterator[Node]:
        stack: list[Node] = []
        cur = self.root
        while stack or cur is not None:
            if cur is not None:
                stack.append(cur)
                cur = cur.right if reverse else cur.left
            else:
                top = stack.pop()
                yield top
                cur = top.left if reverse else top.right

    def inorder(self) -> Iterator[Any]:
        """Yield values left, node, right."""
        return (node.value for node in self._inorder_nodes())

    def postorder(self) -> Iterator[Any]:
        """Yield values left, right, node."""
        first = [self.root] if self.root is not None else []
        second: list[Node] = []
        while first:
            node = first.pop()
            second.append(node)
            if node.left is not None:
                first.append(node.left)
            if node.right is not None:
                first.append(node.right)
        while second:
            yield second.pop().value

    def levelorder(self) -> Iterator[Any]:
        """Yield values level by level, left to right."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def height(self) -> int:
        """Return the number of levels in the tree."""
        levels = 0
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return levels

    def find_values(self, low: Any, high: Any) -> list[Any]:
        """Return, in order, the values v with low <= v <= high."""
        found = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left if self._less(low, node.value) else None
            else:
                node = stack.pop()
                value = node.value
                if not self._less(value, low) and not self._less(high, value):
                    found.append(value)
                node = node.right if self._less(value, high) else None
        return found

    def is_bst(self) -> bool:
        """Return True if an inorder walk never steps to a smaller value."""
        previous = None
        for node in self._inorder_nodes():
            if previous is not None and self._less(node.value, previous.value):
                return False
            previous = node
        return True

    def is_subtree(self, other: BSTree) -> bool:
        """Return True if other's shape and values appear inside this tree."""
        if other.root is None:
            return True
        target = other.root.value
        cur = self.root
        while cur is not None and cur.value != target:
            cur = cur.right if self._less(cur.value, target) else cur.left
        if cur is None:
            return False
        pairs: list[tuple[Node | None, Node | None]] = [(cur, other.root)]
        while pairs:
            mine, theirs = pairs.pop()
            if theirs is None:
                continue
            if mine is None or mine.value != theirs.value:
                return False
            pairs.append((mine.left, theirs.left))
            pairs.append((mine.right, theirs.right))
        return True

    def lca(self, a: Any, b: Any) -> Any:
        """Return the value of the lowest common ancestor of a and b."""
        cur = self.root
        while cur is not None:
            if self._less(cur.value, a) and self._less(cur.value, b):
                cur = cur.right
            elif self._less(a, cur.value) and self._less(b, cur.value):
                cur = cur.left
            else:
                return cur.value
        raise LookupError("no lowest common ancestor")

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(c for c in (node.left, node.right) if c is not None)

    def is_symmetric(self) -> bool:
        """Return True if the tree is its own mirror image."""
        if self.root is None:
            return True
        pairs = [(self.root.left, self.root.right)]
        while pairs:
            first, second = pairs.pop()
            if first is None and second is None:
                continue
            if first is None or second is None or first.value != second.value:
                return False
            pairs.append((first.left, second.right))
            pairs.append((first.right, second.left))
        return True

    def is_balanced(self) -> bool:
        """Return True if no node's subtrees differ in height by more than one."""

        def balanced_height(node: Node | None) -> int | None:
            if node is None:
                return 0
            left = balanced_height(node.left)
            if left is None:
                return None
            right = balanced_height(node.right)
            if right is None or abs(left - right) > 1:
                return None
            return max(left, right) + 1

        return balanced_height(self.root) is not None

    def kth_largest(self, k: int) -> Any:
        """Return the k-th value from the end of the inorder sequence (1-based)."""
        if k >= 1:
            for index, node in enumerate(self._inorder_nodes(reverse=True), 1):
                if index == k:
                    return node.value
        raise IndexError(f"no element number {k}")