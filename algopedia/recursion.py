"""Classic recursive algorithms."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number (0-based) by plain recursion.

    Any ``n`` of 1 or less is returned unchanged.
    """
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def solve_n_queens(n: int) -> list[list[bool]] | None:
    """Place ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Columns are filled left to right, trying rows top to bottom, and the first
    arrangement found is returned as ``board[row][col]``. Returns ``None`` when
    no arrangement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    row_of_column: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            row_of_column.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(col + 1):
                return True
            row_of_column.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[False] * n for _ in range(n)]
    for col, row in enumerate(row_of_column):
        board[row][col] = True
    return board


def format_board(board: Sequence[Sequence[bool]]) -> str:
    """Render a board with `` Q `` for queens and `` * `` for empty squares."""
    return "\n".join(
        "".join(" Q " if cell else " * " for cell in row) for row in board
    )


def recursive_binary_search(items: Sequence[int], target: int) -> int | None:
    """Return the index of ``target`` in sorted ``items``, or ``None``."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


class Move(NamedTuple):
    """One disk moved from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("at least one disk is needed")
    if n == 1:
        yield Move(1, source, target)
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)