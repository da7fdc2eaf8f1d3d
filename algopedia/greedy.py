"""Greedy algorithms: activity selection, fractional knapsack and Huffman coding."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from heapq import heapify, heappop, heappush
from typing import Union

# A Huffman tree is either a leaf symbol or a (left, right) pair of subtrees.
_Tree = Union[str, tuple["_Tree", "_Tree"]]


def select_activities(
    start: Sequence[int], finish: Sequence[int]
) -> list[tuple[int, int]]:
    """Pick the most activities one person can do without overlap.

    Activities are considered in order of finish time (ties broken by start
    time). One is taken when it starts no earlier than the last taken one
    finished. The chosen activities come back as ``(start, finish)`` pairs.
    """
    activities = sorted(
        (end, begin) for begin, end in zip(start, finish, strict=True)
    )
    chosen: list[tuple[int, int]] = []
    last_finish: int | None = None
    for end, begin in activities:
        if last_finish is None or last_finish <= begin:
            chosen.append((begin, end))
            last_finish = end
    return chosen


def fractional_knapsack(
    profits: Sequence[int], weights: Sequence[int], max_weight: int
) -> float:
    """Return the best profit when items may be taken in fractions.

    Items with a weight of zero or less are ignored. Items are taken whole in
    descending order of profit per unit weight until one no longer fits; a
    fraction of that one fills the remaining capacity.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if max_weight < 0:
        raise ValueError("max_weight must not be negative")

    items = sorted(
        (
            (profit / weight, index)
            for index, (profit, weight) in enumerate(zip(profits, weights))
            if weight > 0
        ),
        reverse=True,
    )
    remaining = max_weight
    total = 0.0
    for _, index in items:
        profit, weight = profits[index], weights[index]
        if remaining >= weight:
            remaining -= weight
            total += profit
        else:
            total += profit * (remaining / weight)
            break
    return total


def huffman_codes(message: str) -> dict[str, str]:
    """Return the Huffman code of every distinct character in ``message``.

    The two lightest subtrees are merged repeatedly; a left branch adds ``0``
    and a right branch ``1``. A message with a single distinct character gives
    it the code ``"0"``; an empty message gives no codes.
    """
    frequencies = Counter(message)
    heap: list[tuple[int, int, _Tree]] = [
        (count, order, symbol)
        for order, (symbol, count) in enumerate(sorted(frequencies.items()))
    ]
    if not heap:
        return {}
    if len(heap) == 1:
        return {heap[0][2]: "0"}

    heapify(heap)
    order = len(heap)
    while len(heap) > 1:
        left_count, _, left = heappop(heap)
        right_count, _, right = heappop(heap)
        heappush(heap, (left_count + right_count, order, (left, right)))
        order += 1

    codes: dict[str, str] = {}

    def walk(node: _Tree, prefix: str) -> None:
        if isinstance(node, str):
            codes[node] = prefix
            return
        walk(node[0], prefix + "0")
        walk(node[1], prefix + "1")

    walk(heap[0][2], "")
    return dict(sorted(codes.items()))


def huffman_encode(message: str) -> str:
    """Return ``message`` encoded as a string of ``0`` and ``1`` bits."""
    codes = huffman_codes(message)
    return "".join(codes[symbol] for symbol in message)