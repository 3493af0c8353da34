import pytest

from dsalgo.greedy import fractional_knapsack, greedy_coin_count, schedule_counters


def test_greedy_coin_worked_example():
    assert greedy_coin_count([1, 3, 5], 11) == 3


def test_greedy_coin_unit_coins_and_zero():
    assert greedy_coin_count([1], 7) == 7
    assert greedy_coin_count([5, 3, 1], 0) == 0


def test_greedy_coin_unreachable_amount():
    with pytest.raises(ValueError):
        greedy_coin_count([5], 3)


def test_fractional_knapsack_worked_example():
    value, taken = fractional_knapsack([8, 6, 4, 2, 5], [6, 4, 7, 8, 6], 12)
    assert value == pytest.approx(21.75)
    assert taken == [True, False, True, True, True]


def test_fractional_knapsack_everything_fits():
    weights = [8, 6, 4, 2, 5]
    values = [6, 4, 7, 8, 6]
    value, taken = fractional_knapsack(weights, values, sum(weights))
    assert value == pytest.approx(sum(values))
    assert all(taken)


def test_fractional_knapsack_never_exceeds_total_value():
    weights = [8, 6, 4, 2, 5]
    values = [6, 4, 7, 8, 6]
    for capacity in range(sum(weights) + 1):
        value, _ = fractional_knapsack(weights, values, capacity)
        assert 0 <= value <= sum(values) + 1e-9


def test_fractional_knapsack_rejects_mismatch():
    with pytest.raises(ValueError):
        fractional_knapsack([1, 2], [3], 4)


def test_schedule_counters_serves_everyone():
    times = [3, 2, 4]
    finish, counts = schedule_counters(times, 15)
    assert sum(counts) == 15
    assert len(counts) == len(times)
    assert finish >= min(times) * max(counts[times.index(min(times))], 1)


def test_schedule_single_counter():
    finish, counts = schedule_counters([4], 6)
    assert counts == [6]
    assert finish == 4 * 6


def test_schedule_equal_counters_share_load():
    assert schedule_counters([2, 2], 2) == (2, [1, 1])


def test_schedule_requires_counters():
    with pytest.raises(ValueError):
        schedule_counters([], 3)