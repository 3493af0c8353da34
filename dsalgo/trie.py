"""A trie that counts how often each word was added."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class _TrieNode:
    char: str = ""
    freq: int = 0
    children: dict[str, _TrieNode] = field(default_factory=dict)


class Trie:
    """A character trie storing word frequencies."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def add(self, word: str) -> None:
        """Add one occurrence of word."""
        cur = self._root
        for ch in word:
            cur = cur.children.setdefault(ch, _TrieNode(ch))
        cur.freq += 1

    def remove(self, word: str) -> None:
        """Forget word entirely, pruning nodes no other word needs."""
        if not word:
            self._root.freq = 0
            return
        cur = self._root
        cut_from = self._root
        cut_char = word[0]
        for ch in word:
            child = cur.children.get(ch)
            if child is None:
                return
            if cur.freq > 0 or len(cur.children) > 1:
                cut_from, cut_char = cur, ch
            cur = child
        if cur.children:
            cur.freq = 0
        else:
            del cut_from.children[cut_char]

    def query(self, word: str) -> int:
        """Return how many times word was added."""
        cur = self._root
        for ch in word:
            cur = cur.children.get(ch)
            if cur is None:
                return 0
        return cur.freq

    def _collect(self, node: _TrieNode, word: str, found: list[str]) -> None:
        if node is not self._root:
            word += node.char
            if node.freq > 0:
                found.append(word)
        for ch in sorted(node.children):
            self._collect(node.children[ch], word, found)

    def words(self) -> list[str]:
        """Return every stored word in preorder, children in character order."""
        found: list[str] = []
        self._collect(self._root, "", found)
        return found

    def with_prefix(self, prefix: str) -> list[str]:
        """Return every stored word that starts with prefix, in preorder."""
        if not prefix:
            return self.words()
        cur = self._root
        for ch in prefix:
            cur = cur.children.get(ch)
            if cur is None:
                return []
        found: list[str] = []
        self._collect(cur, prefix[:-1], found)
        return found