import numpy as np

from mincut.graph import Graph, RandomSource, as_generator


def generate_ba(n: int, m: int, rng: RandomSource = None) -> Graph:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.
    The result is always connected.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 (m <= m0, where m0 is the initial number of nodes)
        rng: seed or numpy Generator.

    Returns:
        Graph: the generated graph.
    """
    m0 = max(m, 2)  # initial clique, must be >= m
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m0:
        raise ValueError("n must be >= m")
    rng = as_generator(rng)

    matrix = np.zeros((n, n), dtype=int)

    rows, cols = np.triu_indices(m0, k=1)
    matrix[rows, cols] = 1
    matrix[cols, rows] = 1

    degrees = np.sum(matrix, axis=1)

    for i in range(m0, n):
        probabilities = degrees[:i] / np.sum(degrees[:i])
        targets = rng.choice(i, size=m, replace=False, p=probabilities)

        matrix[i, targets] = 1
        matrix[targets, i] = 1

        degrees[i] = m
        degrees[targets] += 1

    return Graph.from_adjacency(matrix)
