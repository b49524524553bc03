import pytest

from dskit.errors import CapacityError, InvalidPositionError
from dskit.graph import MAX_VSIZE, AdjacencyListGraph, AdjacencyMatrixGraph

LABELS = "ABCDEFGH"
SEARCH_MATRIX = [
    [0, 1, 1, 0, 0, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0, 0],
    [1, 0, 0, 1, 1, 0, 0, 0],
    [0, 1, 1, 0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0, 0, 1, 1],
    [0, 0, 0, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0, 1],
    [0, 0, 0, 0, 1, 0, 1, 0],
]
REP_LABELS = "UVWXY"
REP_MATRIX = [
    [0, 1, 1, 0, 0],
    [1, 0, 1, 1, 0],
    [1, 1, 0, 0, 1],
    [0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
]
REP_EDGES = [(0, 1), (0, 2), (1, 2), (1, 3), (2, 4)]


def _list_graph_from_matrix(labels, matrix):
    graph = AdjacencyListGraph()
    for label in labels:
        graph.append_vertex(label)
    for i, row in enumerate(matrix):
        for j, weight in enumerate(row):
            if weight:
                graph.insert_edge_directed(i, j)
    return graph


def test_matrix_dfs_from_a():
    graph = AdjacencyMatrixGraph(LABELS, SEARCH_MATRIX)
    assert "".join(graph.dfs(0)) == "ABDCEGHF"


def test_matrix_bfs_from_a():
    graph = AdjacencyMatrixGraph(LABELS, SEARCH_MATRIX)
    assert "".join(graph.bfs(0)) == "ABCDEFGH"


@pytest.mark.parametrize("start", range(3))
def test_searches_visit_every_vertex_once(start):
    matrix_graph = AdjacencyMatrixGraph(LABELS, SEARCH_MATRIX)
    list_graph = _list_graph_from_matrix(LABELS, SEARCH_MATRIX)
    for order in (
        matrix_graph.dfs(start),
        matrix_graph.bfs(start),
        list_graph.dfs(start),
        list_graph.bfs(start),
    ):
        assert order[0] == LABELS[start]
        assert sorted(order) == sorted(LABELS)


def test_list_dfs_follows_prepended_order():
    graph = _list_graph_from_matrix(LABELS, SEARCH_MATRIX)
    assert "".join(graph.dfs(0)) == "ACEHGDFB"


def test_list_neighbors_are_most_recent_first():
    graph = AdjacencyListGraph()
    for label in REP_LABELS:
        graph.append_vertex(label)
    for u, v in REP_EDGES:
        graph.insert_edge(u, v)
    assert graph.neighbors(0) == [2, 1]


def test_list_and_matrix_degrees_agree():
    matrix_graph = AdjacencyMatrixGraph(REP_LABELS, REP_MATRIX)
    list_graph = AdjacencyListGraph()
    for label in REP_LABELS:
        list_graph.append_vertex(label)
    for u, v in REP_EDGES:
        list_graph.insert_edge(u, v)
    degrees = [list_graph.degree(v) for v in range(len(REP_LABELS))]
    assert degrees == [matrix_graph.degree(v) for v in range(len(REP_LABELS))]
    assert sum(degrees) == 2 * len(REP_EDGES)


def test_matrix_must_be_square():
    with pytest.raises(ValueError):
        AdjacencyMatrixGraph("AB", [[0, 1]])


def test_invalid_vertices_raise():
    graph = AdjacencyListGraph()
    graph.append_vertex("A")
    with pytest.raises(InvalidPositionError):
        graph.insert_edge(0, 1)
    matrix_graph = AdjacencyMatrixGraph(REP_LABELS, REP_MATRIX)
    with pytest.raises(InvalidPositionError):
        matrix_graph.dfs(len(REP_LABELS))


def test_vertex_capacity():
    graph = AdjacencyListGraph()
    for i in range(MAX_VSIZE):
        graph.append_vertex(i)
    with pytest.raises(CapacityError):
        graph.append_vertex("extra")
    assert len(graph) == MAX_VSIZE


def test_clear_empties_graph():
    graph = _list_graph_from_matrix(LABELS, SEARCH_MATRIX)
    graph.clear()
    assert len(graph) == 0
    assert graph.vertices == ()