import itertools

import networkx as nx
import numpy as np
import pytest

from graph_generators.two_cliques import generate_two_cliques
from mincut.graph import Graph


def brute_force_min_cut(graph: Graph) -> int:
    """Minimum crossing count over every 2-partition with vertex 0 on side P."""
    best = None
    others = range(1, graph.n)
    for r in range(0, graph.n - 1):
        for extra in itertools.combinations(others, r):
            side = {0, *extra}
            crossing = sum(1 for u, v in graph.edges if (u in side) != (v in side))
            if best is None or crossing < best:
                best = crossing
    return best


def stoer_wagner(graph: Graph) -> int:
    value, _ = nx.stoer_wagner(nx.from_numpy_array(graph.to_adjacency()), weight='weight')
    return int(value)


def random_connected_multigraph(n: int, extra_edges: int, rng) -> Graph:
    """A random spanning tree plus `extra_edges` random (possibly parallel) edges."""
    edges = [(int(rng.integers(0, v)), v) for v in range(1, n)]
    while len(edges) < n - 1 + extra_edges:
        u, v = (int(x) for x in rng.integers(0, n, size=2))
        if u != v:
            edges.append((u, v))
    return Graph(n, edges)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def two_cliques():
    # 4-cliques {0,1,2,3} and {4,5,6,7} with bridges (1,4) and (3,4)
    return generate_two_cliques(4)


@pytest.fixture
def two_cliques_three_bridges():
    return generate_two_cliques(4, bridges=[(1, 4), (3, 4), (2, 6)])


@pytest.fixture
def brute_force():
    return brute_force_min_cut


@pytest.fixture
def exact_cut():
    return stoer_wagner


@pytest.fixture
def random_graph():
    return random_connected_multigraph
