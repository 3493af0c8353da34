# dsalgo

Classic data structures and algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.topk` | `least_frequent`, `most_frequent`, `smallest_k`, `largest_k`, `select_top_k` |
| `dsalgo.hashing` | `md5_hex`, `md5_file`, `ring_hash`, `VirtualHost`, `PhysicalHost`, `ConsistentHash` |
| `dsalgo.strings` | `bf_search`, `kmp_next`, `kmp_search` |
| `dsalgo.bst` | `Node`, `BSTree` |
| `dsalgo.avl` | `AVLTree` |
| `dsalgo.rbtree` | `Color`, `RBTree` |
| `dsalgo.skiplist` | `SkipList` |
| `dsalgo.trie` | `Trie` |
| `dsalgo.backtracking` | `subsets`, `min_difference_split`, `balanced_split`, `subsets_with_sum`, `combinations_with_sum`, `knapsack`, `permutations`, `permutations_by_state`, `n_queens` |
| `dsalgo.divide_conquer` | `binary_search`, `median_of_sorted`, `merge_sort`, `quick_sort`, `merge_two_sorted`, `merge_k_sorted`, `kth_largest`, `kth_smallest` |
| `dsalgo.greedy` | `greedy_coin_count`, `fractional_knapsack`, `schedule_counters` |
| `dsalgo.dynamic` | `knapsack_01`, `min_coins`, `fibonacci`, `lcs`, `longest_non_decreasing`, `max_subarray_sum`, `min_triangle_path` |
| `dsalgo.huffman` | `HuffmanTree` |
| `dsalgo.inverted_index` | `InvertTerm`, `InvertList`, `InvertIndex`, `tokenize`, `main` |
| `dsalgo.graph` | `INF`, `Digraph`, `dijkstra`, `floyd` |
| `dsalgo.union_find` | `UnionFind`, `Edge`, `kruskal`, `relatives`, `best_route`, `main` |

Functions that take `k` (`topk`, `kth_largest`, `kth_smallest`) raise
`ValueError` when `k` is outside `1..len(values)`. `BSTree.lca` raises
`LookupError` and `BSTree.kth_largest` raises `IndexError` when there is no
answer.

## Examples

Search trees support `in`, `len()` and the usual traversals:

```python
from dsalgo.bst import BSTree

tree = BSTree()
for value in [58, 24, 67, 0, 34, 62, 69, 5, 41, 64, 78]:
    tree.insert(value)

62 in tree            # True
tree.lca(64, 62)      # 62
list(tree.inorder())  # values in ascending order
```

`AVLTree` and `RBTree` offer `insert`, `remove`, `in`, `len()` and `inorder()`;
`AVLTree.is_balanced()` and `RBTree.is_valid()` check their invariants.

String matching:

```python
from dsalgo.strings import kmp_search

kmp_search("abcabdefabcabc", "abcabc")  # 8
```

Consistent hashing across physical hosts with virtual nodes:

```python
from dsalgo.hashing import ConsistentHash, PhysicalHost

ring = ConsistentHash()
hosts = [PhysicalHost(ip, 150) for ip in ("10.0.0.10", "10.0.0.20", "10.0.0.30")]
for host in hosts:
    ring.add_host(host)

ring.get_host("192.168.1.123")                   # ip of the serving host
ring.distribute(["192.168.1.12", "192.168.1.13"])  # {host ip: [client ips]}
ring.remove_host(hosts[0])                        # its clients move elsewhere
```

`md5_hex` and `md5_file` return the 32-character hex digest, or its middle
16 characters with `length=16`; any other length raises `ValueError`.

Huffman coding round trip:

```python
from dsalgo.huffman import HuffmanTree

text = "ABACDAEFDEGG"
tree = HuffmanTree(text)
assert tree.decode(tree.encode(text)) == text
```

Trie with word counts and prefix search:

```python
from dsalgo.trie import Trie

trie = Trie()
for word in ["hello", "hello", "hel", "heword"]:
    trie.add(word)
trie.query("hello")      # 2
trie.with_prefix("he")   # ['hel', 'hello', 'heword']
```

Shortest paths on a weight matrix, with `INF` for a missing edge:

```python
from dsalgo.graph import INF, dijkstra

graph = [
    [0, 6, 3, INF, INF, INF],
    [6, 0, 2, 5, INF, INF],
    [3, 2, 0, 3, 4, INF],
    [INF, 5, 3, 0, 2, 3],
    [INF, INF, 4, 2, 0, 5],
    [INF, INF, INF, 3, 5, 0],
]
dijkstra(graph, 0)  # [0, 5, 3, 6, 7, 9]
```

## Command-line tools

`dsalgo-index PATH [--suffix SUFFIX]` indexes every file below `PATH` whose
name ends with the suffix (`.cpp` by default), then reads search phrases from
standard input, one per line. For each phrase it prints `<file> freqs:<n>` for
every file containing all its known words, or `no matching content found`.

```
dsalgo-index --help
```

`dsalgo-route [FILE]` reads `n m s t` followed by `m` roads `u v w` from the
file or standard input and prints the smallest possible largest road weight on
a route from `s` to `t`. It exits with status 1 and a message on standard
error when the input is malformed or no route exists.

```
dsalgo-route --help
```

## What this package does not do

The inverted index lives in memory only: `dsalgo-index` rebuilds it on every
run and has no way to save or reload it. Queries match whole
whitespace-separated words exactly; there is no ranking, stemming or phrase
matching.