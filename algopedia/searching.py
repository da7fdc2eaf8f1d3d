"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``items``, or ``None``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] < target:
            low = mid + 1
        elif items[mid] > target:
            high = mid - 1
        else:
            return mid
    return None


def linear_search(items: Sequence[int], target: int) -> int | None:
    """Return the index of the first ``target`` in ``items``, or ``None``."""
    return next(
        (index for index, item in enumerate(items) if item == target), None
    )