"""Weighted undirected graphs: traversal, shortest paths and spanning trees."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    source: int
    target: int
    weight: int


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1``.

    Uses path compression and union by rank.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of two items; return whether they were separate."""
        root_first, root_second = self.find(first), self.find(second)
        if root_first == root_second:
            return False
        if self._rank[root_first] < self._rank[root_second]:
            self._parent[root_first] = root_second
        else:
            self._parent[root_second] = root_first
            if self._rank[root_first] == self._rank[root_second]:
                self._rank[root_first] += 1
        return True


def kruskal_mst(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Edges are taken in order of weight and kept whenever they join two
    vertices not yet connected. The input is left untouched.
    """
    components = DisjointSet(vertex_count)
    return [
        edge
        for edge in sorted(edges, key=lambda edge: edge.weight)
        if components.union(edge.source, edge.target)
    ]


class Graph:
    """An undirected weighted graph stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [
            [] for _ in range(vertex_count)
        ]
        self._edges: list[Edge] = []

    def __len__(self) -> int:
        return self.vertex_count

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"no vertex {vertex} in a graph of {self.vertex_count}")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Connect two vertices in both directions with the same weight."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append((target, weight))
        self._adjacency[target].append((source, weight))
        self._edges.append(Edge(source, target, weight))

    def neighbors(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(neighbor, weight)`` pairs of ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def edges(self) -> list[Edge]:
        """Return every edge once, in the order it was added."""
        return list(self._edges)

    def dijkstra(self, source: int, dest: int) -> list[int | None]:
        """Return the parent of each vertex on shortest paths from ``source``.

        The search stops once ``dest`` is taken from the queue. Vertices with
        no parent (the source and unreached ones) map to ``None``.
        """
        self._check(source)
        self._check(dest)
        distance: list[float] = [float("inf")] * self.vertex_count
        parent: list[int | None] = [None] * self.vertex_count
        visited = [False] * self.vertex_count
        distance[source] = 0
        queue = [(0, source)]
        while queue:
            _, u = heapq.heappop(queue)
            if visited[u]:
                continue
            if u == dest:
                break
            visited[u] = True
            for v, weight in self._adjacency[u]:
                candidate = distance[u] + weight
                if not visited[v] and candidate < distance[v]:
                    distance[v] = candidate
                    parent[v] = u
                    heapq.heappush(queue, (candidate, v))
        return parent

    def shortest_path(self, source: int, dest: int) -> list[int]:
        """Return the vertices of a shortest path from ``source`` to ``dest``."""
        parent = self.dijkstra(source, dest)
        path = [dest]
        while path[-1] != source:
            previous = parent[path[-1]]
            if previous is None:
                raise ValueError(f"vertex {dest} is not reachable from {source}")
            path.append(previous)
        path.reverse()
        return path

    def prim_mst(self) -> list[Edge]:
        """Return a minimum spanning tree grown from vertex 0.

        Each edge runs from a vertex's parent to the vertex, listed in order of
        the vertex; vertices not reachable from 0 are left out.
        """
        if self.vertex_count == 0:
            return []
        keys: list[float] = [float("inf")] * self.vertex_count
        parent: list[int | None] = [None] * self.vertex_count
        in_tree = [False] * self.vertex_count
        keys[0] = 0
        queue = [(0, 0)]
        while queue:
            _, u = heapq.heappop(queue)
            if in_tree[u]:
                continue
            in_tree[u] = True
            for v, weight in self._adjacency[u]:
                if not in_tree[v] and weight < keys[v]:
                    keys[v] = weight
                    parent[v] = u
                    heapq.heappush(queue, (weight, v))
        return [
            Edge(origin, vertex, int(keys[vertex]))
            for vertex, origin in enumerate(parent)
            if vertex > 0 and origin is not None
        ]

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbor, _ in self._adjacency[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[tuple[int, int]]] = [iter(self._adjacency[start])]
        while stack:
            for neighbor, _ in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adjacency[neighbor]))
                    break
            else:
                stack.pop()
        return order


class AdjacencyMatrixGraph:
    """An undirected weighted graph stored as a square matrix; 0 means no edge."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]

    def __len__(self) -> int:
        return self.vertex_count

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"no vertex {vertex} in a graph of {self.vertex_count}")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Set the weight between two vertices in both directions."""
        self._check(source)
        self._check(target)
        self._matrix[source][target] = self._matrix[target][source] = weight

    def weight(self, source: int, target: int) -> int:
        """Return the weight between two vertices, 0 if they are not joined."""
        self._check(source)
        self._check(target)
        return self._matrix[source][target]

    def rows(self) -> list[tuple[int, ...]]:
        """Return a copy of the matrix, one tuple per row."""
        return [tuple(row) for row in self._matrix]

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, row)) for row in self._matrix)