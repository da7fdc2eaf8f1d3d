"""Comparison sorts. Each returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by swapping each position with any smaller element to its right."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(i + 1, n):
            if result[i] > result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def _sift_down(heap: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and moving its root to the end repeatedly."""
    result = list(items)
    n = len(result)
    for root in reversed(range(n // 2)):
        _sift_down(result, n, root)
    for end in reversed(range(1, n)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Sort by splitting in halves, sorting each and merging them (stable)."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[int], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's index."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[int]) -> list[int]:
    """Sort by partitioning around the rightmost element of each segment."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for i in range(n):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result