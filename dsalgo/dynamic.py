"""Dynamic programming: knapsack, coins, Fibonacci, LCS, LIS, subarrays, triangles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def knapsack_01(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    """Solve 0-1 knapsack with a table over item suffixes and capacities.

    Row i of the table holds the best value reachable using items i..n-1.
    Returns the best total value and the indices of the items taken.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    count = len(weights)
    table = [[0] * (capacity + 1) for _ in range(count + 1)]
    for i in range(count - 1, -1, -1):
        below = table[i + 1]
        row = table[i]
        for j in range(capacity + 1):
            if weights[i] > j:
                row[j] = below[j]
            else:
                row[j] = max(below[j], values[i] + below[j - weights[i]])

    chosen = []
    remaining = capacity
    for i in range(count):
        if table[i][remaining] != table[i + 1][remaining]:
            chosen.append(i)
            remaining -= weights[i]
    return table[0][capacity], chosen


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins that add up to amount.

    Uses the recurrence dp[i] = min(1 + dp[i - c]) over coins c <= i.
    """
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for i in range(1, amount + 1):
        for coin in denominations:
            if coin <= i and best[i - coin] + 1 < best[i]:
                best[i] = best[i - coin] + 1
    if best[amount] >= unreachable:
        raise ValueError("the amount cannot be made from these coins")
    return best[amount]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from fibonacci(1) == 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def lcs(first: Sequence, second: Sequence) -> tuple[int, Sequence]:
    """Return the length of a longest common subsequence and one such subsequence.

    The subsequence is a string when first is a string, otherwise a list.
    On ties the walk back prefers dropping an item of first.
    """
    n, m = len(first), len(second)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if first[i - 1] == second[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked = []
    i, j = n, m
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    picked.reverse()
    subsequence = "".join(picked) if isinstance(first, str) else picked
    return table[n][m], subsequence


def longest_non_decreasing(values: Iterable) -> int:
    """Return the length of the longest non-decreasing subsequence (O(n^2))."""
    items = list(values)
    lengths: list[int] = []
    for i, value in enumerate(items):
        lengths.append(
            max(
                (lengths[j] + 1 for j in range(i) if items[j] <= value),
                default=1,
            )
        )
    return max(lengths, default=0)


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run; an empty run counts as 0."""
    best = running = 0
    for value in values:
        running = max(running + value, 0)
        best = max(best, running)
    return best


def min_triangle_path(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a number triangle.

    Each step moves to one of the two adjacent entries in the next row.
    """
    rows = [list(row) for row in triangle]
    if not rows:
        raise ValueError("the triangle has no rows")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} numbers")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + min(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]