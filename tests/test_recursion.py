import math

import pytest

from algopedia.recursion import (
    Move,
    factorial,
    fibonacci,
    format_board,
    recursive_binary_search,
    solve_n_queens,
    tower_of_hanoi,
)


def test_factorial_matches_math():
    for n in range(0, 20):
        assert factorial(n) == math.factorial(n)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_sequence_start():
    assert [fibonacci(n) for n in range(9)] == [0, 1, 1, 2, 3, 5, 8, 13, 21]


def test_fibonacci_recurrence():
    for n in range(2, 20):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def _valid_board(board, n):
    assert len(board) == n
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n
    return True


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solutions_are_valid(n):
    board = solve_n_queens(n)
    assert _valid_board(board, n)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_without_solution(n):
    assert solve_n_queens(n) is None


def test_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_format_board():
    assert format_board(solve_n_queens(1)) == " Q "
    text = format_board(solve_n_queens(4))
    lines = text.split("\n")
    assert len(lines) == 4
    assert all(line.count(" Q ") == 1 and line.count(" * ") == 3 for line in lines)


def test_binary_search_source_example():
    arr = [19, 20, 47, 50, 60, 109, 203, 405, 999]
    assert recursive_binary_search(arr, 203) == arr.index(203)
    for value in arr:
        assert recursive_binary_search(arr, value) == arr.index(value)


def test_binary_search_missing():
    arr = [19, 20, 47, 50, 60, 109, 203, 405, 999]
    assert recursive_binary_search(arr, 21) is None
    assert recursive_binary_search(arr, 1000) is None
    assert recursive_binary_search([], 5) is None


def test_hanoi_single_disk():
    moves = list(tower_of_hanoi(1, "A", "C", "B"))
    assert moves == [Move(1, "A", "C")]
    assert str(moves[0]) == "Move disk 1 from A to C"


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7])
def test_hanoi_moves_are_legal_and_complete(n):
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(tower_of_hanoi(n, "A", "C", "B"))
    assert len(moves) == 2**n - 1
    for move in moves:
        assert rods[move.source][-1] == move.disk
        rods[move.source].pop()
        assert not rods[move.target] or rods[move.target][-1] > move.disk
        rods[move.target].append(move.disk)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_hanoi_rejects_no_disks():
    with pytest.raises(ValueError):
        list(tower_of_hanoi(0, "A", "C", "B"))