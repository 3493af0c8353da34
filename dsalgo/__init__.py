"""Classic data structures and algorithms: trees, hashing, search, sorting, graphs."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "backtracking",
    "bst",
    "divide_conquer",
    "dynamic",
    "graph",
    "greedy",
    "hashing",
    "huffman",
    "inverted_index",
    "rbtree",
    "skiplist",
    "strings",
    "topk",
    "trie",
    "union_find",
]