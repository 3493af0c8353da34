"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _right_rotate(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _left_rotate(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _left_balance(node: _Node) -> _Node:
    node.left = _left_rotate(node.left)
    return _right_rotate(node)


def _right_balance(node: _Node) -> _Node:
    node.right = _right_rotate(node.right)
    return _left_rotate(node)


def _fix_left_heavy(node: _Node) -> _Node:
    if _height(node.left) - _height(node.right) > 1:
        if _height(node.left.left) >= _height(node.left.right):
            return _right_rotate(node)
        return _left_balance(node)
    return node


def _fix_right_heavy(node: _Node) -> _Node:
    if _height(node.right) - _height(node.left) > 1:
        if _height(node.right.right) >= _height(node.right.left):
            return _left_rotate(node)
        return _right_balance(node)
    return node


def _insert(node: _Node | None, value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if node.value > value:
        node.left = _insert(node.left, value)
        node = _fix_left_heavy(node)
    elif node.value < value:
        node.right = _insert(node.right, value)
        node = _fix_right_heavy(node)
    _update(node)
    return node


def _remove(node: _Node | None, value: Any) -> _Node | None:
    if node is None:
        return None
    if node.value > value:
        node.left = _remove(node.left, value)
        node = _fix_right_heavy(node)
    elif node.value < value:
        node.right = _remove(node.right, value)
        node = _fix_left_heavy(node)
    elif node.left is not None and node.right is not None:
        # Take the replacement from the taller side so no rotation is needed.
        if _height(node.left) >= _height(node.right):
            pre = node.left
            while pre.right is not None:
                pre = pre.right
            node.value = pre.value
            node.left = _remove(node.left, pre.value)
        else:
            post = node.right
            while post.left is not None:
                post = post.left
            node.value = post.value
            node.right = _remove(node.right, post.value)
    else:
        return node.left if node.left is not None else node.right
    _update(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced by rotations.

    Values are ordered by ``<`` and ``>``; equal values are stored once.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: Any) -> None:
        """Insert value unless an equal value is already present."""
        self._root = _insert(self._root, value)

    def remove(self, value: Any) -> None:
        """Remove value if present."""
        self._root = _remove(self._root, value)

    def __contains__(self, value: Any) -> bool:
        cur = self._root
        while cur is not None:
            if cur.value > value:
                cur = cur.left
            elif cur.value < value:
                cur = cur.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self.inorder())

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def inorder(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[_Node] = []
        cur = self._root
        while stack or cur is not None:
            if cur is not None:
                stack.append(cur)
                cur = cur.left
            else:
                top = stack.pop()
                yield top.value
                cur = top.right

    def height(self) -> int:
        """Return the number of levels in the tree."""
        return _height(self._root)

    def is_balanced(self) -> bool:
        """Return True if stored heights are right and every node is balanced."""

        def check(node: _Node | None) -> int | None:
            if node is None:
                return 0
            left = check(node.left)
            right = check(node.right)
            if left is None or right is None or abs(left - right) > 1:
                return None
            actual = max(left, right) + 1
            return actual if actual == node.height else None

        return check(self._root) is not None