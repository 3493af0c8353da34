"""Divide and conquer: searching, sorting, merging, medians and selection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_search(values: Sequence, target) -> bool:
    """Return True if target is in the ascending sequence values."""

    def search(lo: int, hi: int) -> bool:
        if lo > hi:
            return False
        mid = (lo + hi) // 2
        if values[mid] == target:
            return True
        if values[mid] > target:
            return search(lo, mid - 1)
        return search(mid + 1, hi)

    return search(0, len(values) - 1)


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of two ascending sequences in logarithmic time."""
    a, b = list(first), list(second)
    if len(a) > len(b):
        a, b = b, a
    m, n = len(a), len(b)
    if m + n == 0:
        raise ValueError("median of two empty sequences")

    if m == 0:
        k = (n - 1) // 2
        if n % 2 == 0:
            return (b[k] + b[k + 1]) / 2
        return float(b[k])

    half = (m + n + 1) // 2
    begin, end = 0, m
    i = j = 0
    while begin <= end:
        i = (begin + end) // 2
        j = half - i
        if i > 0 and j < n and a[i - 1] > b[j]:
            end = i - 1
        elif j > 0 and i < m and b[j - 1] > a[i]:
            begin = i + 1
        else:
            break

    if i == 0:
        left = b[j - 1]
    elif j == 0:
        left = a[i - 1]
    else:
        left = max(a[i - 1], b[j - 1])

    if (m + n) % 2 == 1:
        return float(left)

    if i == m:
        right = b[j]
    elif j == n:
        right = a[i]
    else:
        right = min(a[i], b[j])
    return (left + right) / 2


def merge_two_sorted(first: Iterable, second: Iterable) -> list:
    """Merge two ascending sequences; on ties the first one's item comes first."""
    a, b = list(first), list(second)
    merged = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] > b[j]:
            merged.append(b[j])
            j += 1
        else:
            merged.append(a[i])
            i += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return a new ascending list, sorted by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge_two_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def merge_k_sorted(lists: Iterable[Iterable]) -> list:
    """Merge any number of ascending sequences by pairwise divide and conquer."""
    parts = [list(part) for part in lists]
    if not parts:
        return []

    def merge_range(i: int, j: int) -> list:
        if i >= j:
            return parts[i]
        mid = (i + j) // 2
        return merge_two_sorted(merge_range(i, mid), merge_range(mid + 1, j))

    return merge_range(0, len(parts) - 1)


def _partition(arr: list, i: int, j: int) -> int:
    """Place arr[i] so that smaller items lie left and others right."""
    pivot = arr[i]
    left, right = i, j
    while left < right:
        while left < right and arr[right] >= pivot:
            right -= 1
        if left < right:
            arr[left] = arr[right]
            left += 1
        while left < right and arr[left] < pivot:
            left += 1
        if left < right:
            arr[right] = arr[left]
            right -= 1
    arr[left] = pivot
    return left


def quick_sort(values: Iterable) -> list:
    """Return a new ascending list sorted by quicksort partitioning."""
    arr = list(values)
    pending = [(0, len(arr) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pos = _partition(arr, lo, hi)
        pending.append((lo, pos - 1))
        pending.append((pos + 1, hi))
    return arr


def _select(values: Iterable, k: int, from_largest: bool):
    arr = list(values)
    if not 1 <= k <= len(arr):
        raise ValueError(f"k must be between 1 and {len(arr)}, got {k}")
    index = len(arr) - k if from_largest else k - 1
    lo, hi = 0, len(arr) - 1
    while True:
        pos = _partition(arr, lo, hi)
        if pos == index:
            return arr[pos]
        if pos < index:
            lo = pos + 1
        else:
            hi = pos - 1


def kth_largest(values: Iterable, k: int):
    """Return the k-th largest value (1-based) by quickselect."""
    return _select(values, k, from_largest=True)


def kth_smallest(values: Iterable, k: int):
    """Return the k-th smallest value (1-based) by quickselect."""
    return _select(values, k, from_largest=False)