import pytest

from algopedia.graphs import (
    AdjacencyMatrixGraph,
    DisjointSet,
    Edge,
    Graph,
    kruskal_mst,
)

SAMPLE_EDGES = [(0, 1, 9), (0, 2, 3), (0, 3, 2), (0, 4, 5), (1, 2, 2), (1, 3, 7), (2, 4, 3), (3, 4, 1)]
MST_EDGES = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]


def build(vertex_count, edges):
    graph = Graph(vertex_count)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


def path_weight(graph, path):
    return sum(
        min(w for v, w in graph.neighbors(a) if v == b) for a, b in zip(path, path[1:])
    )


def is_spanning_tree(edges, vertex_count):
    components = DisjointSet(vertex_count)
    merged = all(components.union(e.source, e.target) for e in edges)
    roots = {components.find(v) for v in range(vertex_count)}
    return merged and len(edges) == vertex_count - 1 and len(roots) == 1


def test_disjoint_set_union_and_find():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.find(0) == ds.find(1)
    assert ds.find(2) != ds.find(0)
    ds.union(2, 3)
    ds.union(1, 3)
    assert len({ds.find(v) for v in range(4)}) == 1


def test_disjoint_set_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_kruskal_sample():
    mst = kruskal_mst(MST_EDGES, 4)
    assert is_spanning_tree(mst, 4)
    assert sum(e.weight for e in mst) == 19
    assert [e.weight for e in mst] == sorted(e.weight for e in mst)
    assert MST_EDGES[0] == Edge(0, 1, 10)


def test_kruskal_disconnected_gives_forest():
    mst = kruskal_mst([Edge(0, 1, 1), Edge(2, 3, 2)], 4)
    assert mst == [Edge(0, 1, 1), Edge(2, 3, 2)]


def test_prim_matches_kruskal_total():
    graph = build(4, [(e.source, e.target, e.weight) for e in MST_EDGES])
    prim = graph.prim_mst()
    assert is_spanning_tree(prim, 4)
    assert sum(e.weight for e in prim) == sum(e.weight for e in kruskal_mst(MST_EDGES, 4))
    assert [e.target for e in prim] == [1, 2, 3]


def test_prim_empty_graph():
    assert Graph(0).prim_mst() == []


def test_edges_and_neighbors():
    graph = build(5, SAMPLE_EDGES)
    assert graph.edges() == [Edge(*e) for e in SAMPLE_EDGES]
    assert graph.neighbors(0) == [(1, 9), (2, 3), (3, 2), (4, 5)]
    assert len(graph) == 5


def test_shortest_path_direct():
    graph = build(4, [(0, 1, 1), (0, 2, 6), (0, 3, 9), (1, 2, 3), (1, 3, 2), (2, 3, 1)])
    assert graph.shortest_path(1, 0) == [1, 0]


def test_shortest_path_through_zero_weight_edge():
    graph = build(
        5,
        [(0, 1, 1), (0, 2, 1), (0, 3, 6), (0, 4, 7), (1, 2, 5),
         (1, 3, 0), (1, 4, 3), (2, 3, 3), (2, 4, 4), (3, 4, 1)],
    )
    path = graph.shortest_path(0, 4)
    assert path == [0, 1, 3, 4]
    assert path_weight(graph, path) < path_weight(graph, [0, 4])


def test_dijkstra_parents_end_at_source():
    graph = build(5, SAMPLE_EDGES)
    parent = graph.dijkstra(0, 4)
    assert parent[0] is None
    path = graph.shortest_path(0, 4)
    assert path[0] == 0 and path[-1] == 4
    assert all(parent[b] == a for a, b in zip(path, path[1:]))


def test_shortest_path_unreachable():
    graph = build(3, [(0, 1, 1)])
    with pytest.raises(ValueError):
        graph.shortest_path(0, 2)


def test_bfs_and_dfs_visit_each_vertex_once():
    graph = build(5, SAMPLE_EDGES)
    assert sorted(graph.bfs(0)) == [0, 1, 2, 3, 4]
    assert sorted(graph.dfs(0)) == [0, 1, 2, 3, 4]
    assert graph.bfs(0)[:5] == [0, 1, 2, 3, 4]


def test_dfs_order():
    graph = build(5, SAMPLE_EDGES)
    assert graph.dfs(0) == [0, 1, 2, 4, 3]


def test_traversal_with_self_loops_only_reaches_component():
    graph = build(5, [(0, 0, 9), (0, 1, 2), (1, 1, 7)])
    assert graph.bfs(0) == [0, 1]
    assert graph.dfs(1) == [1, 0]


def test_invalid_vertex():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        graph.bfs(5)
    with pytest.raises(ValueError):
        Graph(-1)


def test_adjacency_matrix_symmetric():
    graph = AdjacencyMatrixGraph(5)
    for source, target, weight in SAMPLE_EDGES:
        graph.add_edge(source, target, weight)
    rows = graph.rows()
    assert all(rows[i][j] == rows[j][i] for i in range(5) for j in range(5))
    assert graph.weight(1, 3) == 7
    assert graph.weight(1, 4) == 0
    assert rows[0] == (0, 9, 3, 2, 5)
    assert str(graph).splitlines()[0] == "0 9 3 2 5"


def test_adjacency_matrix_invalid_vertex():
    graph = AdjacencyMatrixGraph(2)
    with pytest.raises(ValueError):
        graph.weight(0, 3)