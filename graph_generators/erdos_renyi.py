import networkx as nx
import numpy as np

from mincut.graph import Graph, RandomSource, as_generator


# draws of G(n, p) before giving up on finding an edge
MAX_RESAMPLES = 1000


def _sample_matrix(n: int, p: float, rng: np.random.Generator) -> np.ndarray:
    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    matrix[rows[edges], cols[edges]] = 1

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = 1
    return matrix


def generate_er(n: int, p: float, rng: RandomSource = None) -> Graph:
    """
    Generates a connected Erdős-Rényi (G(n, p)) random graph.

    G(n, p) is not connected in general, so only its largest connected
    component is kept (relabelled to 0..n'-1). Samples whose largest
    component is a single vertex are redrawn from the same rng.

    Returns:
        Graph: the largest component, with at least 2 vertices.
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if not 0.0 < p <= 1.0:
        raise ValueError("p must be in (0, 1]")
    rng = as_generator(rng)

    for _ in range(MAX_RESAMPLES):
        G = nx.from_numpy_array(_sample_matrix(n, p, rng))
        largest_cc_nodes = max(nx.connected_components(G), key=len)
        if len(largest_cc_nodes) >= 2:
            return Graph.from_networkx(G.subgraph(largest_cc_nodes))

    raise ValueError(f"G({n}, {p}) produced no edge in {MAX_RESAMPLES} draws")
