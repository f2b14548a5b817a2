from typing import List, NamedTuple, Optional, Union

import networkx as nx
import numpy as np

from mincut.union_find import UnionFind


RandomSource = Union[None, int, np.random.SeedSequence, np.random.Generator]


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    """
    Normalises a random source into a numpy Generator.

    None draws fresh OS entropy, an int or SeedSequence seeds a new PCG64
    stream, and an existing Generator is passed through untouched so that
    successive calls keep consuming the same stream.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class Edge(NamedTuple):
    tail: int
    head: int


class Graph:
    """
    Undirected multigraph on the vertices 0..n-1 stored as a list of edges.

    Parallel edges are allowed. The contraction algorithms reorder `edges` in
    place; use `copy()` to keep a private edge list.
    """
    __slots__ = ['n', 'edges']

    def __init__(self, n: int, edges=None):
        self.n = n
        self.edges: List[Edge] = [Edge(int(u), int(v)) for u, v in (edges or [])]

    def __repr__(self):
        return f"Graph(n={self.n}, |E|={len(self.edges)})"

    def copy(self) -> 'Graph':
        other = Graph.__new__(Graph)
        other.n = self.n
        other.edges = list(self.edges)
        return other

    def validate(self) -> None:
        """
        Checks the preconditions of the cut algorithms: at least two vertices,
        every endpoint in range and a connected graph.
        """
        if self.n < 2:
            raise ValueError(f"graph must have at least 2 vertices, got {self.n}")
        for i, (u, v) in enumerate(self.edges):
            if not (0 <= u < self.n and 0 <= v < self.n):
                raise ValueError(f"edge {i} ({u}, {v}) has an endpoint outside [0, {self.n})")
        if not nx.is_connected(self.to_networkx()):
            raise ValueError("graph must be connected")

    @classmethod
    def from_adjacency(cls, matrix: np.ndarray) -> 'Graph':
        """
        Builds a multigraph from a symmetric (n, n) matrix of edge multiplicities.
        The diagonal is ignored.
        """
        matrix = np.asarray(matrix)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("graph_matrix must be square")

        n = matrix.shape[0]
        rows, cols = np.triu_indices(n, k=1)
        counts = matrix[rows, cols].astype(int)
        keep = counts > 0
        tails = np.repeat(rows[keep], counts[keep])
        heads = np.repeat(cols[keep], counts[keep])
        return cls(n, zip(tails.tolist(), heads.tolist()))

    def to_adjacency(self) -> np.ndarray:
        matrix = np.zeros((self.n, self.n), dtype=int)
        for u, v in self.edges:
            if u != v:
                matrix[u, v] += 1
                matrix[v, u] += 1
        return matrix

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> 'Graph':
        """
        Converts a networkx (multi)graph, relabelling nodes to 0..n-1 in sorted order.
        """
        H = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return cls(H.number_of_nodes(), ((u, v) for u, v in H.edges() if u != v))

    def to_networkx(self) -> nx.MultiGraph:
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self.edges)
        return G


class ContractedGraph(Graph):
    """
    The original graph seen after contracting it down to `n` super-vertices.

    `uf` records which original vertices have been merged and `n` always equals
    `uf.nb_subsets`. The edge list holds no self-loops.
    """
    __slots__ = ['uf']

    def __init__(self, edges: List[Edge], uf: UnionFind):
        self.n = uf.nb_subsets
        self.edges = edges
        self.uf = uf

    @classmethod
    def from_graph(cls, graph: Graph, uf: Optional[UnionFind] = None) -> 'ContractedGraph':
        return cls(list(graph.edges), uf if uf is not None else UnionFind(graph.n))
