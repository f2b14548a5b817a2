from functools import total_ordering
from typing import List, Tuple

from mincut.graph import Graph
from mincut.union_find import UnionFind


@total_ordering
class GraphCut:
    """
    A cut of a graph: the number of crossing edges and the union-find whose
    two subsets are the two sides. Cuts compare by `cut_size` only.
    """
    __slots__ = ['cut_size', 'uf']

    def __init__(self, cut_size: int, uf: UnionFind):
        self.cut_size = cut_size
        self.uf = uf

    def __repr__(self):
        return f"GraphCut(cut_size={self.cut_size})"

    def __eq__(self, other):
        if not isinstance(other, GraphCut):
            return NotImplemented
        return self.cut_size == other.cut_size

    def __lt__(self, other):
        if not isinstance(other, GraphCut):
            return NotImplemented
        return self.cut_size < other.cut_size

    __hash__ = None

    @classmethod
    def sentinel(cls, graph: Graph) -> 'GraphCut':
        """
        Starting value for a minimum search, worse than any real cut of `graph`.

        `n` alone is not an upper bound on a multigraph (two vertices joined by
        five parallel edges have a min cut of 5), so the bound is |E| + 1,
        which is never below n for a connected graph.
        """
        return cls(max(graph.n, len(graph.edges) + 1), UnionFind(graph.n))

    def partitions(self) -> Tuple[List[int], List[int]]:
        """
        Splits 0..n-1 by whether a vertex shares vertex 0's root.
        Both lists are in increasing order.
        """
        roots = self.uf.roots()
        if roots.shape[0] == 0:
            return [], []
        in_p = roots == roots[0]
        P = [int(v) for v in in_p.nonzero()[0]]
        Q = [int(v) for v in (~in_p).nonzero()[0]]
        return P, Q

    def crossing_edges(self, graph: Graph) -> int:
        """Recounts the edges of `graph` that cross this cut."""
        roots = self.uf.roots()
        return sum(1 for u, v in graph.edges if roots[u] != roots[v])
