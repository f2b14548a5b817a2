from collections import Counter

import numpy as np
import pytest

from graph_generators.barabasi_albert import generate_ba
from mincut.graph import Graph
from mincut.karger import karger_cut, karger_min_cut
from mincut.repetitions import karger_repetitions


@pytest.mark.parametrize("seed", range(10))
def test_single_run_reports_a_consistent_cut(seed, random_graph):
    rng = np.random.default_rng(seed)
    graph = random_graph(9, 12, rng)
    original = graph.copy()

    cut = karger_cut(graph, rng)

    assert cut.uf.nb_subsets == 2
    assert 0 <= cut.cut_size <= len(graph.edges)
    assert cut.crossing_edges(original) == cut.cut_size
    P, Q = cut.partitions()
    assert P and Q
    assert sorted(P + Q) == list(range(graph.n))


def test_single_run_reorders_edges_in_place(two_cliques):
    before = list(two_cliques.edges)
    karger_cut(two_cliques, np.random.default_rng(3))
    assert Counter(two_cliques.edges) == Counter(before)


def test_two_vertices_need_no_contraction():
    graph = Graph(2, [(0, 1), (1, 0), (0, 1)])
    cut = karger_cut(graph, 0)
    assert cut.cut_size == 3
    assert cut.partitions() == ([0], [1])


def test_two_cliques_three_bridges(two_cliques_three_bridges):
    cut = karger_min_cut(two_cliques_three_bridges, repetitions=500, rng=2024)
    assert cut.cut_size == 3


def test_two_cliques_finds_bridge_partition(two_cliques):
    cut = karger_min_cut(two_cliques, repetitions=500, rng=7)
    assert cut.cut_size == 2
    assert cut.partitions() == ([0, 1, 2, 3], [4, 5, 6, 7])


def test_prescribed_repetitions_find_the_bridges(two_cliques_three_bridges):
    found = [karger_min_cut(two_cliques_three_bridges, rng=seed).cut_size
             for seed in range(10)]
    assert found == [3] * 10


def test_wrapper_leaves_caller_edges_alone(two_cliques):
    before = list(two_cliques.edges)
    karger_min_cut(two_cliques, repetitions=20, rng=1)
    assert two_cliques.edges == before


def test_matches_stoer_wagner_on_random_graph(exact_cut):
    graph = generate_ba(12, 2, rng=5)
    cut = karger_min_cut(graph, repetitions=1000, rng=11)
    assert cut.cut_size == exact_cut(graph)
    assert cut.crossing_edges(graph) == cut.cut_size


def test_repetition_count():
    assert karger_repetitions(2) == 1
    assert karger_repetitions(8) == int(28 * np.log(8))


def test_rejects_non_positive_repetitions(two_cliques):
    with pytest.raises(ValueError):
        karger_min_cut(two_cliques, repetitions=0)
