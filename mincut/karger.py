from typing import Optional

from mincut.contraction import contract, crossing_edges
from mincut.graph import Graph, RandomSource, as_generator
from mincut.graph_cut import GraphCut
from mincut.repetitions import karger_repetitions, repeat_min_cut
from mincut.union_find import UnionFind


def karger_cut(graph: Graph, rng: RandomSource = None) -> GraphCut:
    """
    One run of Karger's contraction algorithm in O(n + m alpha(n)).

    Contracts random edges until two super-vertices remain and counts the
    edges between them. A single run returns a minimum cut with probability
    at least 1 / C(n, 2); see `karger_min_cut` for the repeated version.
    The graph is assumed connected. Only the order of `graph.edges` changes.
    """
    rng = as_generator(rng)
    uf = UnionFind(graph.n)
    start = contract(graph.edges, uf, 2, rng)
    # self-loops are never counted: their endpoints are connected
    return GraphCut(crossing_edges(graph.edges[start:], uf), uf)


def karger_min_cut(graph: Graph,
                   repetitions: Optional[int] = None,
                   rng: RandomSource = None,
                   progress: bool = False) -> GraphCut:
    """
    Best cut over `repetitions` independent Karger runs, C(n, 2) * ln(n) by default.
    """
    if repetitions is None:
        repetitions = karger_repetitions(graph.n)
    return repeat_min_cut(karger_cut, graph, repetitions, rng, progress, desc="Karger")
