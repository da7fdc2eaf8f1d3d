"""Basic array operations: search, insertion, deletion, reversal and sorting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from algopedia.searching import linear_search


def find_element(items: Sequence[int], key: int) -> int | None:
    """Return the index of the first ``key`` in ``items``, or ``None``."""
    return linear_search(items, key)


def delete_element(items: Sequence[int], key: int) -> list[int]:
    """Return a copy of ``items`` without the first occurrence of ``key``."""
    position = find_element(items, key)
    if position is None:
        raise ValueError(f"element {key} not found")
    return [*items[:position], *items[position + 1 :]]


def insert_element(items: Sequence[int], value: int, position: int) -> list[int]:
    """Return a copy of ``items`` with ``value`` placed at ``position``."""
    if not 0 <= position <= len(items):
        raise IndexError(f"position {position} is out of range")
    return [*items[:position], value, *items[position:]]


def reverse_array(items: Iterable[int]) -> list[int]:
    """Return the elements of ``items`` in reverse order."""
    return list(items)[::-1]


def sort_both_ways(items: Iterable[int]) -> tuple[list[int], list[int]]:
    """Return ``items`` sorted ascending and sorted descending."""
    values = list(items)
    return sorted(values), sorted(values, reverse=True)


def indexed_elements(array: Any) -> Iterator[tuple[tuple[int, ...], Any]]:
    """Yield ``(index, value)`` for every element of a nested array, row-major.

    ``index`` is the tuple of positions leading to the value.
    """

    def walk(node: Any, prefix: tuple[int, ...]) -> Iterator[tuple[tuple[int, ...], Any]]:
        if isinstance(node, (list, tuple)):
            for position, child in enumerate(node):
                yield from walk(child, (*prefix, position))
        else:
            yield prefix, node

    if not isinstance(array, (list, tuple)):
        raise TypeError("array must be a list or tuple")
    yield from walk(array, ())


def read_array(text: str) -> list[int]:
    """Read a count followed by that many integers, separated by whitespace."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing element count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("element count must not be negative")
    values = tokens[1 : count + 1]
    if len(values) < count:
        raise ValueError(f"expected {count} elements, got {len(values)}")
    return [int(value) for value in values]