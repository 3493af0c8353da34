"""Top-k selection: frequency ranking with bounded heaps and quickselect."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable
from itertools import count, islice
from typing import TypeVar

K = TypeVar("K", bound=Hashable)


def _check_k(k: int, available: int) -> None:
    if not 1 <= k <= available:
        raise ValueError(f"k must be between 1 and {available}, got {k}")


def least_frequent(values: Iterable[K], k: int) -> list[tuple[K, int]]:
    """Return the k values that occur least often, as (value, count) pairs.

    A max-heap of size k keyed on the count is kept; a later value only
    displaces the heap top when its count is strictly smaller. Pairs come
    back in heap pop order, highest count first.
    """
    counts = Counter(values)
    _check_k(k, len(counts))
    items = iter(counts.items())
    tie = count()
    heap = [(-cnt, next(tie), key) for key, cnt in islice(items, k)]
    heapq.heapify(heap)
    for key, cnt in items:
        if -heap[0][0] > cnt:
            heapq.heapreplace(heap, (-cnt, next(tie), key))
    return [(key, -neg) for neg, _, key in sorted(heap)]


def most_frequent(values: Iterable[K], k: int) -> list[tuple[K, int]]:
    """Return the k values that occur most often, as (value, count) pairs.

    A min-heap of size k keyed on the count is kept; a later value only
    displaces the heap top when its count is strictly larger. Pairs come
    back in heap pop order, lowest count first.
    """
    counts = Counter(values)
    _check_k(k, len(counts))
    items = iter(counts.items())
    tie = count()
    heap = [(cnt, next(tie), key) for key, cnt in islice(items, k)]
    heapq.heapify(heap)
    for key, cnt in items:
        if heap[0][0] < cnt:
            heapq.heapreplace(heap, (cnt, next(tie), key))
    return [(key, cnt) for cnt, _, key in sorted(heap)]


def smallest_k(values: Iterable[float], k: int) -> list[float]:
    """Return the k smallest numbers, largest of them first (max-heap pop order)."""
    items = list(values)
    _check_k(k, len(items))
    heap = [-v for v in items[:k]]
    heapq.heapify(heap)
    for v in items[k:]:
        if -heap[0] > v:
            heapq.heapreplace(heap, -v)
    return sorted((-v for v in heap), reverse=True)


def largest_k(values: Iterable[float], k: int) -> list[float]:
    """Return the k largest numbers, smallest of them first (min-heap pop order)."""
    items = list(values)
    _check_k(k, len(items))
    heap = items[:k]
    heapq.heapify(heap)
    for v in items[k:]:
        if heap[0] < v:
            heapq.heapreplace(heap, v)
    return sorted(heap)


def _partition(arr: list, begin: int, end: int) -> int:
    """Place arr[begin] so that larger-or-equal items lie left, smaller right."""
    pivot = arr[begin]
    i, j = begin, end
    while i < j:
        while i < j and arr[j] < pivot:
            j -= 1
        if i < j:
            arr[i] = arr[j]
            i += 1
        while i < j and arr[i] > pivot:
            i += 1
        if i < j:
            arr[j] = arr[i]
            j -= 1
    arr[i] = pivot
    return i


def select_top_k(values: Iterable[float], k: int) -> list[float]:
    """Return the k largest values using quickselect partitioning.

    The input is not modified; the result holds the first k slots of the
    partitioned copy, in the order partitioning left them.
    """
    arr = list(values)
    _check_k(k, len(arr))
    begin, end = 0, len(arr) - 1
    while True:
        pos = _partition(arr, begin, end)
        if pos == k - 1:
            return arr[:k]
        if pos > k - 1:
            end = pos - 1
        else:
            begin = pos + 1