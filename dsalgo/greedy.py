"""Greedy algorithms: coin change, fractional knapsack and counter scheduling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def greedy_coin_count(coins: Iterable[int], amount: int) -> int:
    """Count coins used when always taking the largest coin that still fits.

    The greedy choice need not be optimal.
    """
    denominations = sorted(coins, reverse=True)
    used = 0
    for coin in denominations:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        taken, amount = divmod(amount, coin)
        used += taken
    if amount > 0:
        raise ValueError("the amount cannot be made from these coins")
    return used


def fractional_knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[float, list[bool]]:
    """Fill a knapsack by best value per weight, splitting the last item.

    Returns the total value and, per item, whether any of it was taken.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    order = sorted(
        range(len(weights)), key=lambda i: values[i] / weights[i], reverse=True
    )
    taken = [False] * len(weights)
    total = 0.0
    for i in order:
        if weights[i] <= capacity:
            total += values[i]
            capacity -= weights[i]
            taken[i] = True
        else:
            total += values[i] * (capacity / weights[i])
            taken[i] = True
            break
    return total, taken


def schedule_counters(times: Sequence[int], customers: int) -> tuple[int, list[int]]:
    """Assign customers one by one to the counter that finishes soonest.

    times gives each counter's service time per customer. Returns the time
    needed to serve everyone and the number of customers per counter, in
    the order the counters were given.
    """
    if not times:
        raise ValueError("at least one counter is needed")
    order = sorted(range(len(times)), key=lambda i: times[i])
    served = [0] * len(order)
    finish = 0
    fastest = times[order[0]]
    for _ in range(customers):
        cost = fastest * (served[0] + 1)
        for slot, counter in enumerate(order[1:], 1):
            t = times[counter] * (served[slot] + 1)
            if t <= cost:
                served[slot] += 1
                finish = max(finish, t)
                break
        else:
            served[0] += 1
            finish = fastest * served[0]
    counts = [0] * len(times)
    for slot, counter in enumerate(order):
        counts[counter] = served[slot]
    return finish, counts