"""Backtracking over subset trees and permutation trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def subsets(values: Iterable) -> Iterator[list]:
    """Yield every subset of values, taking each item before leaving it out."""
    items = list(values)
    chosen: list = []

    def walk(i: int) -> Iterator[list]:
        if i == len(items):
            yield list(chosen)
            return
        chosen.append(items[i])
        yield from walk(i + 1)
        chosen.pop()
        yield from walk(i + 1)

    yield from walk(0)


def min_difference_split(values: Iterable[int]) -> tuple[list[int], int]:
    """Split values into two groups whose sums differ least.

    Returns the first chosen group met with the smallest difference and
    that difference.
    """
    items = list(values)
    chosen: list[int] = []
    best: list[int] = []
    best_diff: int | None = None

    def walk(i: int, picked: int, rest: int) -> None:
        nonlocal best, best_diff
        if i == len(items):
            diff = abs(picked - rest)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = list(chosen)
            return
        value = items[i]
        chosen.append(value)
        walk(i + 1, picked + value, rest - value)
        chosen.pop()
        walk(i + 1, picked, rest)

    walk(0, 0, sum(items))
    return best, best_diff if best_diff is not None else 0


def balanced_split(values: Iterable[int]) -> tuple[list[int], int]:
    """Choose half of the values so the chosen and remaining sums differ least.

    Branches that can no longer reach exactly half the items are pruned.
    """
    items = list(values)
    half = len(items) // 2
    chosen: list[int] = []
    best: list[int] = []
    best_diff: int | None = None

    def walk(i: int, picked: int, rest: int) -> None:
        nonlocal best, best_diff
        if i == len(items):
            if len(chosen) != half:
                return
            diff = abs(picked - rest)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = list(chosen)
            return
        remaining = len(items) - i - 1
        value = items[i]
        if len(chosen) < half:
            chosen.append(value)
            walk(i + 1, picked + value, rest - value)
            chosen.pop()
        if len(chosen) + remaining >= half:
            walk(i + 1, picked, rest)

    walk(0, 0, sum(items))
    return best, best_diff if best_diff is not None else 0


def subsets_with_sum(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield every subset of non-negative values summing to target.

    Subsets come in subset-tree order: each item is tried taken, then left out.
    """
    items = list(values)
    chosen: list[int] = []

    def walk(i: int, picked: int, rest: int) -> Iterator[list[int]]:
        if i == len(items):
            if picked == target:
                yield list(chosen)
            return
        value = items[i]
        rest -= value
        if picked + value <= target:
            chosen.append(value)
            yield from walk(i + 1, picked + value, rest)
            chosen.pop()
        if picked + rest >= target:
            yield from walk(i + 1, picked, rest)

    yield from walk(0, 0, sum(items))


def combinations_with_sum(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield every combination of positive values, each used once, summing to target."""
    items = list(values)
    chosen: list[int] = []

    def walk(start: int, needed: int) -> Iterator[list[int]]:
        if needed == 0:
            yield list(chosen)
            return
        for k in range(start, len(items)):
            value = items[k]
            if needed >= value:
                chosen.append(value)
                yield from walk(k + 1, needed - value)
                chosen.pop()

    yield from walk(0, target)


def knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    """Solve 0-1 knapsack by backtracking with value-bound pruning.

    Returns the best total value and the indices of the items taken.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    count = len(weights)
    chosen: list[int] = []
    best: list[int] = []
    best_value = 0

    def walk(i: int, weight: int, value: int, rest: int) -> None:
        nonlocal best, best_value
        if i == count:
            if best_value < value:
                best_value = value
                best = list(chosen)
            return
        rest -= values[i]
        if weight + weights[i] <= capacity:
            chosen.append(i)
            walk(i + 1, weight + weights[i], value + values[i], rest)
            chosen.pop()
        if value + rest > best_value:
            walk(i + 1, weight, value, rest)

    walk(0, 0, 0, sum(values))
    return best_value, best


def permutations(values: Iterable) -> Iterator[list]:
    """Yield every permutation of values, generated by swapping in place."""
    items = list(values)

    def walk(i: int) -> Iterator[list]:
        if i == len(items):
            yield list(items)
            return
        for k in range(i, len(items)):
            items[i], items[k] = items[k], items[i]
            yield from walk(i + 1)
            items[i], items[k] = items[k], items[i]

    yield from walk(0)


def permutations_by_state(values: Iterable) -> Iterator[list]:
    """Yield every permutation of values, picking unused positions in index order."""
    items = list(values)
    used = [False] * len(items)
    chosen: list = []

    def walk() -> Iterator[list]:
        if len(chosen) == len(items):
            yield list(chosen)
            return
        for k, value in enumerate(items):
            if not used[k]:
                used[k] = True
                chosen.append(value)
                yield from walk()
                chosen.pop()
                used[k] = False

    yield from walk()


def n_queens(n: int) -> Iterator[list[int]]:
    """Yield every placement of n non-attacking queens.

    Each placement lists, row by row, the 1-based column of that row's queen.
    """
    board = list(range(1, n + 1))

    def safe(i: int) -> bool:
        return all(
            board[i] != board[j] and abs(i - j) != abs(board[i] - board[j])
            for j in range(i)
        )

    def walk(i: int) -> Iterator[list[int]]:
        if i == n:
            yield list(board)
            return
        for k in range(i, n):
            board[i], board[k] = board[k], board[i]
            if safe(i):
                yield from walk(i + 1)
            board[i], board[k] = board[k], board[i]

    yield from walk(0)