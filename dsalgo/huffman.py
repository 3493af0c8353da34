"""Huffman trees and prefix-free binary codes."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count


@dataclass(eq=False)
class _Node:
    char: str
    weight: int
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """A Huffman tree built from the character frequencies of a text."""

    def __init__(self, text: str) -> None:
        weights = Counter(text)
        if not weights:
            raise ValueError("cannot build a Huffman tree from empty text")
        tie = count()
        heap = [(weight, next(tie), _Node(ch, weight)) for ch, weight in weights.items()]
        heapq.heapify(heap)
        while len(heap) > 1:
            w1, _, n1 = heapq.heappop(heap)
            w2, _, n2 = heapq.heappop(heap)
            heapq.heappush(heap, (w1 + w2, next(tie), _Node("", w1 + w2, n1, n2)))
        self._root = heap[0][2]
        self._codes = self._build_codes()

    def _build_codes(self) -> dict[str, str]:
        if self._root.is_leaf:
            return {self._root.char: "0"}
        codes: dict[str, str] = {}
        stack = [(self._root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                codes[node.char] = code
            else:
                stack.append((node.right, code + "1"))
                stack.append((node.left, code + "0"))
        return codes

    def codes(self) -> dict[str, str]:
        """Return the code of every character: '0' goes left, '1' goes right."""
        return dict(self._codes)

    def encode(self, text: str) -> str:
        """Return text as a string of '0' and '1' characters."""
        try:
            return "".join(self._codes[ch] for ch in text)
        except KeyError as exc:
            raise ValueError(f"character {exc.args[0]!r} has no code") from None

    def decode(self, bits: str) -> str:
        """Return the text that a string of '0' and '1' characters encodes."""
        if self._root.is_leaf:
            if any(bit != "0" for bit in bits):
                raise ValueError("invalid bit for a one-symbol code")
            return self._root.char * len(bits)
        out = []
        cur = self._root
        for bit in bits:
            if bit == "0":
                cur = cur.left
            elif bit == "1":
                cur = cur.right
            else:
                raise ValueError(f"invalid bit {bit!r}")
            if cur.is_leaf:
                out.append(cur.char)
                cur = self._root
        if cur is not self._root:
            raise ValueError("bits end in the middle of a code")
        return "".join(out)