"""Classic algorithms and data structures: dynamic programming, greedy methods,
recursion, searching, sorting, graphs, arrays and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "circular",
    "doubly",
    "dynamic",
    "graphs",
    "greedy",
    "recursion",
    "searching",
    "singly",
    "sorting",
]