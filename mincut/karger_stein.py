import math
from typing import Optional

from mincut.contraction import contract_graph
from mincut.graph import ContractedGraph, Graph, RandomSource, as_generator
from mincut.graph_cut import GraphCut
from mincut.repetitions import karger_stein_repetitions, repeat_min_cut


# graphs with at most this many super-vertices are contracted straight to 2
BASE_CASE_SIZE = 6

INV_SQRT_2 = 1.0 / math.sqrt(2)


def _target_size(n: int) -> int:
    return 1 + math.ceil(n * INV_SQRT_2)


def karger_stein_cut(graph: Graph, rng: RandomSource = None) -> GraphCut:
    """
    One run of the recursive Karger-Stein contraction algorithm.

    Instead of recursing, the intermediate contracted graphs waiting to be
    processed are kept on an explicit stack. A graph with more than
    BASE_CASE_SIZE super-vertices is contracted twice, independently, down to
    1 + ceil(n / sqrt(2)) super-vertices and both children are pushed; smaller
    graphs are contracted to two super-vertices and compared with the best
    cut so far. A run succeeds with probability Omega(1 / log n).

    `graph` itself is not modified.
    """
    rng = as_generator(rng)
    best_minimum_cut = GraphCut.sentinel(graph)
    graphs = [ContractedGraph.from_graph(graph)]

    while graphs:  # algorithm's main loop
        current = graphs.pop()

        if current.n <= BASE_CASE_SIZE:
            leaf = contract_graph(current, 2, rng)
            # a 2-vertex contracted graph has no self-loops: every edge crosses
            best_minimum_cut = min(best_minimum_cut, GraphCut(len(leaf.edges), leaf.uf))
        else:
            t = _target_size(current.n)
            graphs.append(contract_graph(current, t, rng))
            graphs.append(contract_graph(current, t, rng))

    return best_minimum_cut


def karger_stein_min_cut(graph: Graph,
                         repetitions: Optional[int] = None,
                         rng: RandomSource = None,
                         progress: bool = False) -> GraphCut:
    """
    Best cut over `repetitions` independent Karger-Stein runs, ln(n)^2 by default.
    """
    if repetitions is None:
        repetitions = karger_stein_repetitions(graph.n)
    return repeat_min_cut(karger_stein_cut, graph, repetitions, rng, progress,
                          desc="Karger-Stein")
