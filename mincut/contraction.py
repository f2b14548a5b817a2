from typing import List

import numpy as np

from mincut.graph import ContractedGraph, Edge
from mincut.union_find import UnionFind


def contract(edges: List[Edge], uf: UnionFind, k: int, rng: np.random.Generator) -> int:
    """
    Merges random edges into `uf` until exactly `k` subsets remain.

    The edge list is consumed as a lazily generated uniform random permutation:
    the edge at the cursor is swapped with a uniformly chosen edge among the
    ones not consumed yet, then its endpoints are merged. This has the same
    distribution as shuffling the whole list and scanning it, but only touches
    the edges actually consumed.

    `edges` is reordered in place. Returns the final cursor; edges[cursor:]
    are the unconsumed edges. If `uf` already has `k` subsets nothing happens
    and 0 is returned.
    """
    start = 0
    m = len(edges) - 1
    while uf.nb_subsets != k:
        j = start + int(rng.integers(0, m + 1))
        edges[start], edges[j] = edges[j], edges[start]
        tail, head = edges[start]
        uf.merge(tail, head)
        start += 1
        m -= 1
    return start


def crossing_edges(edges: List[Edge], uf: UnionFind) -> int:
    """Number of edges whose endpoints lie in different subsets."""
    return sum(1 for tail, head in edges if not uf.connected(tail, head))


def contract_graph(graph: ContractedGraph, k: int, rng: np.random.Generator) -> ContractedGraph:
    """
    Contracts `graph` down to `k` super-vertices on a private copy of its
    union-find, so calling it twice on the same graph yields two independent
    children. Self-loops are dropped from the child's edges.
    """
    uf = graph.uf.copy()
    start = contract(graph.edges, uf, k, rng)
    edges = [e for e in graph.edges[start:] if not uf.connected(e.tail, e.head)]
    return ContractedGraph(edges, uf)
