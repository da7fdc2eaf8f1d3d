"""Dynamic-programming solutions, each in a tabulated and a memoized form."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cache


def _check_coins(coins: Sequence[int]) -> tuple[int, ...]:
    coins = tuple(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    return coins


def coin_change_ways_tabulated(coins: Sequence[int], target: int) -> int:
    """Count the ways to reach ``target`` using any number of each coin."""
    if target < 0:
        raise ValueError("target must not be negative")
    coins = _check_coins(coins)
    # ways[amount]: combinations of the coins seen so far that sum to amount.
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def coin_change_ways_memoized(coins: Sequence[int], target: int) -> int:
    """Count the ways to reach ``target`` by include/exclude recursion.

    With no coins at all there is no way to reach any target, zero included.
    A negative target can never be reached.
    """
    coins = _check_coins(coins)

    @cache
    def count(amount: int, available: int) -> int:
        if available == 0 or amount < 0:
            return 0
        if amount == 0:
            return 1
        include = count(amount - coins[available - 1], available)
        exclude = count(amount, available - 1)
        return include + exclude

    return count(target, len(coins))


def fibonacci_tabulated(n: int) -> int:
    """Return the ``n``-th Fibonacci number (0-based) built bottom-up."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_memoized(n: int) -> int:
    """Return the ``n``-th Fibonacci number (0-based) by cached recursion.

    Any ``n`` of 1 or less is returned unchanged.
    """

    @cache
    def term(k: int) -> int:
        if k <= 1:
            return k
        return term(k - 1) + term(k - 2)

    return term(n)


def _check_items(
    profits: Sequence[int], weights: Sequence[int], max_weight: int
) -> None:
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if max_weight < 0:
        raise ValueError("max_weight must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def knapsack_tabulated(
    profits: Sequence[int], weights: Sequence[int], max_weight: int
) -> int:
    """Return the best 0/1 knapsack profit within ``max_weight``."""
    _check_items(profits, weights, max_weight)
    best = [0] * (max_weight + 1)
    for profit, weight in zip(profits, weights):
        best = [
            0
            if capacity == 0
            else previous
            if weight > capacity
            else max(previous, profit + best[capacity - weight])
            for capacity, previous in enumerate(best)
        ]
    return best[max_weight]


def knapsack_memoized(
    profits: Sequence[int], weights: Sequence[int], max_weight: int
) -> int:
    """Return the best 0/1 knapsack profit by cached include/exclude recursion."""
    _check_items(profits, weights, max_weight)

    @cache
    def best(capacity: int, items: int) -> int:
        if capacity == 0 or items == 0:
            return 0
        weight = weights[items - 1]
        exclusion = best(capacity, items - 1)
        if weight > capacity:
            return exclusion
        inclusion = profits[items - 1] + best(capacity - weight, items - 1)
        return max(inclusion, exclusion)

    return best(max_weight, len(profits))


def _trace_lcs(first: str, second: str, length: Callable[[int, int], int]) -> str:
    """Walk a table of LCS lengths back from the end to rebuild the sequence."""
    chars: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif length(i - 1, j) > length(i, j - 1):
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def lcs_tabulated(first: str, second: str) -> str:
    """Return a longest common subsequence of two strings, built bottom-up."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = 1 + table[i - 1][j - 1]
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return _trace_lcs(first, second, lambda i, j: table[i][j])


def lcs_memoized(first: str, second: str) -> str:
    """Return a longest common subsequence of two strings by cached recursion."""

    @cache
    def length(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        if first[i - 1] == second[j - 1]:
            return 1 + length(i - 1, j - 1)
        return max(length(i - 1, j), length(i, j - 1))

    length(len(first), len(second))
    return _trace_lcs(first, second, length)