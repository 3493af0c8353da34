from collections import Counter
from itertools import combinations, permutations as it_permutations

import pytest

from dsalgo.backtracking import (
    balanced_split,
    combinations_with_sum,
    knapsack,
    min_difference_split,
    n_queens,
    permutations,
    permutations_by_state,
    subsets,
    subsets_with_sum,
)


def _all_index_subsets(n):
    for size in range(n + 1):
        yield from combinations(range(n), size)


def test_subsets_count_and_order():
    result = list(subsets([1, 2, 3]))
    assert len(result) == 2 ** 3
    assert result[0] == [1, 2, 3]
    assert result[-1] == []
    assert sorted(map(tuple, result)) == sorted(
        tuple([1, 2, 3][i] for i in idx) for idx in _all_index_subsets(3)
    )


def test_min_difference_split_is_optimal():
    values = [12, 6, 7, 11, 16, 3, 8]
    chosen, diff = min_difference_split(values)
    total = sum(values)
    assert diff == abs(total - 2 * sum(chosen))
    best = min(
        abs(total - 2 * sum(values[i] for i in idx))
        for idx in _all_index_subsets(len(values))
    )
    assert diff == best
    assert not (Counter(chosen) - Counter(values))


def test_balanced_split_takes_half_and_is_optimal():
    values = [12, 6, 7, 11, 16, 3, 8, 4]
    chosen, diff = balanced_split(values)
    assert len(chosen) == len(values) // 2
    total = sum(values)
    assert diff == abs(total - 2 * sum(chosen))
    best = min(
        abs(total - 2 * sum(values[i] for i in idx))
        for idx in combinations(range(len(values)), len(values) // 2)
    )
    assert diff == best


def test_subsets_with_sum_matches_exhaustive_search():
    values = [4, 8, 12, 16, 7, 9, 3]
    target = 18
    found = list(subsets_with_sum(values, target))
    assert all(sum(s) == target for s in found)
    expected = [
        tuple(values[i] for i in idx)
        for idx in _all_index_subsets(len(values))
        if sum(values[i] for i in idx) == target
    ]
    assert sorted(map(tuple, found)) == sorted(expected)


def test_combinations_with_sum_matches_exhaustive_search():
    values = [4, 8, 12, 16, 7, 9, 3, 3]
    target = 18
    found = list(combinations_with_sum(values, target))
    expected = [
        tuple(values[i] for i in idx)
        for idx in _all_index_subsets(len(values))
        if idx and sum(values[i] for i in idx) == target
    ]
    assert sorted(map(tuple, found)) == sorted(expected)


def test_combinations_with_zero_target_yields_empty():
    assert list(combinations_with_sum([4, 8], 0)) == [[]]


def test_knapsack_is_optimal():
    weights = [12, 5, 8, 9, 6]
    values = [9, 2, 4, 7, 8]
    capacity = 20
    best_value, taken = knapsack(weights, values, capacity)
    assert sum(weights[i] for i in taken) <= capacity
    assert sum(values[i] for i in taken) == best_value
    brute = max(
        sum(values[i] for i in idx)
        for idx in _all_index_subsets(len(weights))
        if sum(weights[i] for i in idx) <= capacity
    )
    assert best_value == brute


def test_knapsack_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack([1, 2], [1], 5)


def test_permutations_swap_order():
    result = list(permutations([1, 2, 3]))
    assert result == [
        [1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 2, 1], [3, 1, 2]
    ]


def test_permutations_cover_all():
    values = [1, 2, 3, 4]
    result = list(permutations(values))
    assert sorted(map(tuple, result)) == sorted(it_permutations(values))


def test_permutations_by_state_in_index_order():
    values = [1, 2, 3]
    assert list(permutations_by_state(values)) == [
        list(p) for p in it_permutations(values)
    ]


def test_eight_queens_count_and_validity():
    solutions = list(n_queens(8))
    assert len(solutions) == 92
    for board in solutions:
        assert sorted(board) == list(range(1, 9))
        for i, j in combinations(range(8), 2):
            assert abs(i - j) != abs(board[i] - board[j])