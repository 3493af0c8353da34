"""A red-black search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Color(Enum):
    """The colour of a red-black tree node."""

    BLACK = 0
    RED = 1


@dataclass(eq=False)
class _Node:
    value: Any
    parent: _Node | None = None
    left: _Node | None = None
    right: _Node | None = None
    color: Color = Color.BLACK


def _color(node: _Node | None) -> Color:
    return Color.BLACK if node is None else node.color


class RBTree:
    """A red-black tree ordered by ``<`` and ``>``; equal values are stored once."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: Any) -> None:
        """Insert value unless an equal value is already present."""
        if self._root is None:
            self._root = _Node(value)
            return
        parent = None
        cur = self._root
        while cur is not None:
            parent = cur
            if cur.value > value:
                cur = cur.left
            elif cur.value < value:
                cur = cur.right
            else:
                return
        node = _Node(value, parent=parent, color=Color.RED)
        if parent.value > value:
            parent.left = node
        else:
            parent.right = node
        if parent.color is Color.RED:
            self._fix_after_insert(node)

    def remove(self, value: Any) -> None:
        """Remove value if present."""
        cur = self._root
        while cur is not None:
            if cur.value > value:
                cur = cur.left
            elif cur.value < value:
                cur = cur.right
            else:
                break
        if cur is None:
            return

        if cur.left is not None and cur.right is not None:
            pre = cur.left
            while pre.right is not None:
                pre = pre.right
            cur.value = pre.value
            cur = pre

        child = cur.left if cur.left is not None else cur.right
        if child is not None:
            child.parent = cur.parent
            if cur.parent is None:
                self._root = child
            elif cur.parent.left is cur:
                cur.parent.left = child
            else:
                cur.parent.right = child
            if cur.color is Color.BLACK:
                self._fix_after_remove(child)
        elif cur.parent is None:
            self._root = None
        else:
            if cur.color is Color.BLACK:
                self._fix_after_remove(cur)
            if cur.parent.left is cur:
                cur.parent.left = None
            else:
                cur.parent.right = None

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

    def is_valid(self) -> bool:
        """Return True if the tree satisfies every red-black and ordering rule."""
        if self._root is None:
            return True
        if self._root.color is not Color.BLACK or self._root.parent is not None:
            return False

        def black_height(node: _Node | None, low: Any, high: Any) -> int | None:
            if node is None:
                return 1
            if low is not None and not node.value > low:
                return None
            if high is not None and not node.value < high:
                return None
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    return None
                if node.color is Color.RED and _color(child) is Color.RED:
                    return None
            left = black_height(node.left, low, node.value)
            right = black_height(node.right, node.value, high)
            if left is None or right is None or left != right:
                return None
            return left + (1 if node.color is Color.BLACK else 0)

        return black_height(self._root, None, None) is not None

    def _left_rotate(self, node: _Node) -> None:
        child = node.right
        child.parent = node.parent
        if node.parent is None:
            self._root = child
        elif node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child
        node.right = child.left
        if child.left is not None:
            child.left.parent = node
        child.left = node
        node.parent = child

    def _right_rotate(self, node: _Node) -> None:
        child = node.left
        child.parent = node.parent
        if node.parent is None:
            self._root = child
        elif node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child
        node.left = child.right
        if child.right is not None:
            child.right.parent = node
        child.right = node
        node.parent = child

    def _fix_after_insert(self, node: _Node) -> None:
        while _color(node.parent) is Color.RED:
            parent = node.parent
            grand = parent.parent
            if grand.left is parent:
                uncle = grand.right
                if _color(uncle) is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if parent.right is node:
                        node = parent
                        self._left_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._right_rotate(node.parent.parent)
                    break
            else:
                uncle = grand.left
                if _color(uncle) is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if parent.left is node:
                        node = parent
                        self._right_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._left_rotate(node.parent.parent)
                    break
        self._root.color = Color.BLACK

    def _fix_after_remove(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            parent = node.parent
            if parent.left is node:
                brother = parent.right
                if _color(brother) is Color.RED:
                    parent.color = Color.RED
                    brother.color = Color.BLACK
                    self._left_rotate(parent)
                    brother = node.parent.right
                if _color(brother.left) is Color.BLACK and _color(brother.right) is Color.BLACK:
                    brother.color = Color.RED
                    node = node.parent
                else:
                    if _color(brother.right) is not Color.RED:
                        brother.color = Color.RED
                        brother.left.color = Color.BLACK
                        self._right_rotate(brother)
                        brother = node.parent.right
                    brother.color = node.parent.color
                    node.parent.color = Color.BLACK
                    brother.right.color = Color.BLACK
                    self._left_rotate(node.parent)
                    break
            else:
                brother = parent.left
                if _color(brother) is Color.RED:
                    parent.color = Color.RED
                    brother.color = Color.BLACK
                    self._right_rotate(parent)
                    brother = node.parent.left
                if _color(brother.left) is Color.BLACK and _color(brother.right) is Color.BLACK:
                    brother.color = Color.RED
                    node = node.parent
                else:
                    if _color(brother.left) is not Color.RED:
                        brother.color = Color.RED
                        brother.right.color = Color.BLACK
                        self._left_rotate(brother)
                        brother = node.parent.left
                    brother.color = node.parent.color
                    node.parent.color = Color.BLACK
                    brother.left.color = Color.BLACK
                    self._right_rotate(node.parent)
                    break
        node.color = Color.BLACK