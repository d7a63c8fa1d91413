"""Tests for the dense matrix graph."""
import math
import random

import networkx as nx
import pytest

from matrix_graph import MatrixGraph


def test_new_graph_has_no_edges() -> None:
    graph = MatrixGraph(4)
    assert graph.num_vertices() == 4
    assert len(graph) == 4
    assert graph.num_edges() == 0
    assert graph.edges() == []
    assert not any(graph.is_edge(i, j) for i in range(4) for j in range(4))


def test_needs_at_least_one_vertex() -> None:
    with pytest.raises(ValueError):
        MatrixGraph(0)


def test_labels_must_match_vertex_count() -> None:
    with pytest.raises(ValueError):
        MatrixGraph(3, labels=["A", "B"])


def test_add_edge_is_symmetric() -> None:
    graph = MatrixGraph(3)
    graph.add_edge(0, 2, 4.5)

    assert graph.is_edge(0, 2)
    assert graph.is_edge(2, 0)
    assert graph.weight(0, 2) == 4.5
    assert graph.weight(2, 0) == 4.5
    assert graph.num_edges() == 1


def test_add_edge_overwrites_weight() -> None:
    graph = MatrixGraph(2)
    graph.add_edge(0, 1, 3.0)
    graph.add_edge(1, 0, 1.5)

    assert graph.weight(0, 1) == 1.5
    assert graph.num_edges() == 1


def test_delete_edge() -> None:
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 2.0)
    graph.delete_edge(1, 0)

    assert not graph.is_edge(0, 1)
    assert not graph.is_edge(1, 0)


def test_delete_missing_edge_is_noop() -> None:
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 2.0)
    graph.delete_edge(1, 2)

    assert graph.edges() == [(0, 1, 2.0)]


def test_weight_of_missing_edge_is_infinite() -> None:
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 2.0)
    graph.delete_edge(0, 1)

    assert graph.weight(0, 1) == math.inf
    assert graph.weight(1, 2) == math.inf


def test_zero_weight_edge_is_present() -> None:
    graph = MatrixGraph(2)
    graph.add_edge(0, 1, 0.0)

    assert graph.is_edge(0, 1)
    assert graph.weight(0, 1) == 0.0


@pytest.mark.parametrize("weight", [math.inf, -math.inf, math.nan])
def test_non_finite_weight_rejected(weight) -> None:
    graph = MatrixGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 1, weight)
    assert not graph.is_edge(0, 1)


def test_self_loop_rejected() -> None:
    graph = MatrixGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 3.0)])
    with pytest.raises(ValueError):
        graph.add_edge(1, 1, 9.0)

    assert not graph.is_edge(1, 1)
    assert 1 not in graph.neighbours(1)
    assert graph.num_edges() == 3


@pytest.mark.parametrize("vertex", [-1, 3, 100])
def test_out_of_range_vertex_raises(vertex) -> None:
    graph = MatrixGraph(3)
    with pytest.raises(IndexError):
        graph.is_edge(0, vertex)
    with pytest.raises(IndexError):
        graph.weight(vertex, 0)
    with pytest.raises(IndexError):
        graph.add_edge(vertex, 1, 1.0)
    with pytest.raises(IndexError):
        graph.delete_edge(1, vertex)
    with pytest.raises(IndexError):
        graph.neighbours(vertex)
    assert graph.num_edges() == 0


def test_neighbours_ascending() -> None:
    graph = MatrixGraph(5)
    graph.add_edge(2, 4, 1.0)
    graph.add_edge(2, 0, 1.0)
    graph.add_edge(3, 2, 1.0)

    assert graph.neighbours(2) == [0, 3, 4]
    assert graph.neighbours(0) == [2]
    assert graph.neighbours(1) == []


def test_edges_listed_once_in_row_major_order() -> None:
    graph = MatrixGraph(4)
    graph.add_edge(3, 1, 5.0)
    graph.add_edge(2, 0, 1.0)
    graph.add_edge(0, 1, 2.0)

    assert graph.edges() == [(0, 1, 2.0), (0, 2, 1.0), (1, 3, 5.0)]


def test_symmetry_after_random_mutations() -> None:
    rng = random.Random(7)
    graph = MatrixGraph(6)
    for _ in range(200):
        i, j = rng.randrange(6), rng.randrange(6)
        if i == j:
            continue
        if rng.random() < 0.6:
            graph.add_edge(i, j, rng.random() * 10)
        else:
            graph.delete_edge(i, j)

    for i in range(6):
        for j in range(6):
            assert graph.is_edge(i, j) == graph.is_edge(j, i)
            assert graph.weight(i, j) == graph.weight(j, i)


def test_directed_graph_stores_one_direction() -> None:
    graph = MatrixGraph(3, directed=True)
    graph.add_edge(0, 1, 2.0)

    assert graph.is_edge(0, 1)
    assert not graph.is_edge(1, 0)
    assert graph.edges() == [(0, 1, 2.0)]

    graph.add_edge(1, 0, 3.0)
    graph.delete_edge(0, 1)
    assert graph.edges() == [(1, 0, 3.0)]


def test_copy_is_independent() -> None:
    graph = MatrixGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0)], labels="XYZ")
    clone = graph.copy()
    clone.delete_edge(0, 1)

    assert graph.is_edge(0, 1)
    assert not clone.is_edge(0, 1)
    assert clone.label(2) == "Z"


def test_labels_default_to_index() -> None:
    graph = MatrixGraph(2)
    assert graph.label(1) == "1"


def test_to_networkx() -> None:
    graph = MatrixGraph.from_edges(4, [(0, 1, 1.0), (2, 3, 2.5)])
    G = graph.to_networkx()

    assert isinstance(G, nx.Graph)
    assert sorted(G.nodes()) == [0, 1, 2, 3]
    assert G[2][3]["weight"] == 2.5
    assert G.number_of_edges() == 2


def test_repr() -> None:
    graph = MatrixGraph.from_edges(3, [(0, 1, 1.0)])
    assert repr(graph) == "MatrixGraph(3 vertices, 1 edges, undirected)"
