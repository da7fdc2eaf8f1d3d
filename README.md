# algopedia

Classic algorithms and data structures written as plain, readable Python,
with no dependencies outside the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `algopedia.dynamic` | `coin_change_ways_*`, `fibonacci_*`, `knapsack_*` and `lcs_*`, each in a `_tabulated` and a `_memoized` form |
| `algopedia.recursion` | `factorial`, `fibonacci`, `solve_n_queens` with `format_board`, `recursive_binary_search`, `tower_of_hanoi` (yields `Move` tuples) |
| `algopedia.greedy` | `select_activities`, `fractional_knapsack`, `huffman_codes`, `huffman_encode` |
| `algopedia.searching` | `binary_search`, `linear_search` (both return an index or `None`) |
| `algopedia.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`; each returns a new list |
| `algopedia.graphs` | `Graph` (adjacency lists) with `dijkstra`, `shortest_path`, `prim_mst`, `bfs`, `dfs`; `AdjacencyMatrixGraph`; `Edge`, `DisjointSet`, `kruskal_mst` |
| `algopedia.singly` | `SinglyLinkedList`: push, append, insert after a value, delete head/end/nth, three ways to reverse, search, node swap |
| `algopedia.doubly` | `DoublyLinkedList`: the same operations with links both ways, plus `node_at`, `insert_after` and `delete_after` on nodes |
| `algopedia.circular` | `CircularLinkedList`: insertion, deletion, reversal, search and node swap on a ring |
| `algopedia.arrays` | `find_element`, `delete_element`, `insert_element`, `reverse_array`, `sort_both_ways`, `indexed_elements`, `read_array` |

## Examples

```python
from algopedia.dynamic import fibonacci_tabulated, knapsack_tabulated, lcs_tabulated
from algopedia.greedy import fractional_knapsack
from algopedia.recursion import factorial, tower_of_hanoi
from algopedia.searching import binary_search

fibonacci_tabulated(10)                                # 55
factorial(10)                                          # 3628800
lcs_tabulated("hello!", "hello world!")                # 'hello!'
binary_search([3, 5, 7, 8, 10, 19, 38, 90, 100], 38)   # 6

profits = [25, 50, 75, 25, 30, 10]
weights = [30, 10, 20, 10, 30, 20]
knapsack_tabulated(profits, weights, 50)               # 150
fractional_knapsack(profits, weights, 50)              # 158.33...

for move in tower_of_hanoi(2):
    print(move)
# Move disk 1 from A to B
# Move disk 2 from A to C
# Move disk 1 from B to C
```

Graphs are built edge by edge and then queried:

```python
from algopedia.graphs import Graph

graph = Graph(4)
graph.add_edge(0, 1, 1)
graph.add_edge(0, 2, 6)
graph.add_edge(0, 3, 9)
graph.add_edge(1, 2, 3)
graph.add_edge(1, 3, 2)
graph.add_edge(2, 3, 1)

graph.shortest_path(1, 0)   # [1, 0]
graph.prim_mst()            # [Edge(0, 1, 1), Edge(3, 2, 1), Edge(1, 3, 2)]
graph.bfs(0)                # [0, 1, 2, 3]
graph.dfs(0)                # [0, 1, 2, 3]
```

`shortest_path` raises `ValueError` when the destination cannot be reached.

Linked lists read like ordinary Python containers, while their methods
carry out the classic pointer operations:

```python
from algopedia.singly import SinglyLinkedList

numbers = SinglyLinkedList([1, 2, 3, 4, 5])
numbers.reverse_iterative()
list(numbers)          # [5, 4, 3, 2, 1]
numbers.search(3)      # 2
numbers.swap(1, 5)     # True
str(numbers)           # '1 -> 4 -> 3 -> 2 -> 5 -> NULL'
```

Deleting from an empty list raises `IndexError`.

## What it does not do

This is a library only: there is no command-line program, and nothing is
read from or written to files. Input parsing is limited to `read_array`,
which turns a count followed by that many integers into a list.

## Requirements

Python 3.10 or later. There are no runtime dependencies; the tests use
pytest (`pip install algopedia[test]`).