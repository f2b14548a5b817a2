import networkx as nx
import numpy as np
import pytest

from mincut.graph import ContractedGraph, Edge, Graph, as_generator
from mincut.union_find import UnionFind


def test_edges_become_named_tuples():
    g = Graph(3, [(0, 1), [1, 2]])
    assert g.edges == [Edge(0, 1), Edge(1, 2)]
    assert g.edges[1].tail == 1 and g.edges[1].head == 2


def test_copy_has_private_edge_list():
    g = Graph(3, [(0, 1), (1, 2)])
    h = g.copy()
    h.edges.reverse()
    assert g.edges == [(0, 1), (1, 2)]


def test_from_adjacency_expands_multiplicities():
    matrix = np.array([[0, 2, 0],
                       [2, 0, 1],
                       [0, 1, 0]])
    g = Graph.from_adjacency(matrix)
    assert g.n == 3
    assert sorted(g.edges) == [(0, 1), (0, 1), (1, 2)]
    np.testing.assert_array_equal(g.to_adjacency(), matrix)


def test_from_adjacency_rejects_non_square():
    with pytest.raises(ValueError):
        Graph.from_adjacency(np.zeros((2, 3)))


def test_from_networkx_relabels_sorted():
    G = nx.Graph([(10, 30), (30, 20)])
    g = Graph.from_networkx(G)
    assert g.n == 3
    assert sorted(tuple(sorted(e)) for e in g.edges) == [(0, 2), (1, 2)]


def test_to_networkx_keeps_parallel_edges():
    G = Graph(2, [(0, 1), (0, 1)]).to_networkx()
    assert G.number_of_edges() == 2
    assert G.number_of_nodes() == 2


@pytest.mark.parametrize("graph, message", [
    (Graph(1, []), "at least 2"),
    (Graph(3, [(0, 1), (1, 3)]), "outside"),
    (Graph(4, [(0, 1), (2, 3)]), "connected"),
])
def test_validate_rejects_bad_graphs(graph, message):
    with pytest.raises(ValueError, match=message):
        graph.validate()


def test_validate_accepts_connected_graph(two_cliques):
    two_cliques.validate()


def test_contracted_graph_tracks_subset_count():
    uf = UnionFind(4)
    uf.merge(0, 1)
    cg = ContractedGraph([Edge(1, 2), Edge(2, 3)], uf)
    assert cg.n == 3

    fresh = ContractedGraph.from_graph(Graph(4, [(0, 1)]))
    assert fresh.n == 4
    assert fresh.uf.nb_subsets == 4


def test_as_generator_passes_generators_through():
    gen = np.random.default_rng(1)
    assert as_generator(gen) is gen
    a = as_generator(7).integers(0, 1000, size=5)
    b = as_generator(7).integers(0, 1000, size=5)
    np.testing.assert_array_equal(a, b)
