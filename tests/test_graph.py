"""Tests for graph construction, validation and parsing."""

import pytest

from optcolor.generators import PETERSEN_ADJACENCY, petersen_graph
from optcolor.graph import Graph, InvalidGraph, as_graph


def test_from_adjacency_list():
    g = Graph.from_adjacency_list([[1], [0, 2], [1]])
    assert g.num_vertices == 3
    assert g.edges == ((0, 1), (1, 2))
    assert g.neighbors(1) == (0, 2)


def test_from_adjacency_list_mapping():
    g = Graph.from_adjacency_list({1: [0], 0: [1], 2: []})
    assert g.num_vertices == 3
    assert g.num_edges == 1


def test_from_adjacency_list_removes_duplicates():
    g = Graph.from_adjacency_list([[1, 1], [0]])
    assert g.neighbors(0) == (1,)


def test_from_adjacency_matrix():
    g = Graph.from_adjacency_matrix([[0, 1, 1], [1, 0, 0], [1, 0, 0]])
    assert g.neighbors(0) == (1, 2)
    assert g.edges == ((0, 1), (0, 2))


def test_from_edges():
    g = Graph.from_edges(4, [(0, 1), (1, 0), (2, 3)])
    assert g.num_edges == 2
    assert g.has_edge(3, 2)
    assert not g.has_edge(0, 2)


def test_list_and_matrix_agree_on_petersen():
    matrix = [[1 if j in row else 0 for j in range(10)] for row in PETERSEN_ADJACENCY]
    assert Graph.from_adjacency_matrix(matrix).edges == petersen_graph().edges
    assert petersen_graph().num_edges == 15


@pytest.mark.parametrize(
    "adjacency",
    [
        [],
        [[1], []],  # asymmetric
        [[0]],  # self-loop
        [[3], [0]],  # out of range
        [[-1], [0]],
        [["1"], [0]],
    ],
)
def test_invalid_adjacency_list(adjacency):
    with pytest.raises(InvalidGraph):
        Graph.from_adjacency_list(adjacency)


def test_invalid_mapping_keys():
    with pytest.raises(InvalidGraph):
        Graph.from_adjacency_list({0: [2], 2: [0]})
    with pytest.raises(InvalidGraph):
        Graph.from_adjacency_list({0: [], "a": []})


@pytest.mark.parametrize(
    "matrix",
    [
        [],
        [[0, 1], [1, 0], [0, 0]],  # not square
        [[0, 1, 0], [1, 0]],
        [[0, 1], [0, 0]],  # asymmetric
        [[1, 0], [0, 0]],  # diagonal
        [[0, 2], [2, 0]],
    ],
)
def test_invalid_adjacency_matrix(matrix):
    with pytest.raises(InvalidGraph):
        Graph.from_adjacency_matrix(matrix)


def test_invalid_edges():
    with pytest.raises(InvalidGraph):
        Graph.from_edges(0, [])
    with pytest.raises(InvalidGraph):
        Graph.from_edges(2, [(0, 2)])
    with pytest.raises(InvalidGraph):
        Graph.from_edges(2, [(1, 1)])


@pytest.mark.parametrize("edge", [(0, 1.5), ("0", 1), (True, 2), (0, None)])
def test_from_edges_rejects_non_integer_vertices(edge):
    with pytest.raises(InvalidGraph):
        Graph.from_edges(3, [edge])


def test_invalid_graph_is_value_error():
    assert issubclass(InvalidGraph, ValueError)


def test_as_graph_detects_representation():
    g = petersen_graph()
    assert as_graph(g) is g
    assert as_graph([[1], [0]]).edges == ((0, 1),)
    assert as_graph([[0, 1], [1, 0]]).edges == ((0, 1),)
    assert as_graph([[]]).num_vertices == 1
    assert as_graph({0: [1], 1: [0]}).num_edges == 1


def test_as_graph_reads_repeated_neighbours_as_list():
    # Square and 0/1, but vertex 0 lists 1 twice
    g = as_graph([[1, 1], [0, 0]])
    assert g.edges == ((0, 1),)
    assert as_graph([[0]]).num_vertices == 1
    assert as_graph([[1, 2, 1], [0, 2], [0, 1]]).num_edges == 3


def test_from_file(tmp_path):
    path = tmp_path / "triangle.txt"
    path.write_text("3\n3\n0 1\n1 2\n2 0\n\n")

    g = Graph.from_file(path)
    assert g.name == "triangle"
    assert g.num_vertices == 3
    assert g.num_edges == 3
    assert str(g) == "Graph(triangle: n=3, m=3)"


@pytest.mark.parametrize(
    "content",
    [
        "3\n",  # too few lines
        "x\n1\n0 1\n",  # bad header
        "3\n2\n0 1\n",  # missing edge
        "3\n1\n0\n",  # malformed edge
        "3\n1\n0 a\n",
        "3\n1\n0 1\n1 2\n",  # edge count mismatch
        "3\n1\n0 5\n",  # out of range
    ],
)
def test_from_file_rejects_invalid(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content)
    with pytest.raises(ValueError):
        Graph.from_file(path)
