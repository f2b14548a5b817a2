from mincut.graph import Graph


def generate_two_cliques(k: int = 4, bridges=None) -> Graph:
    """
    Two k-cliques {0..k-1} and {k..2k-1} joined by `bridges` inter-clique edges.

    The default is the 8-vertex example with bridges (1, 4) and (3, 4), whose
    minimum cut is 2. Any vertex of the first clique has degree >= k - 1, so
    for len(bridges) < k - 1 the bridges form the unique minimum cut.
    """
    if k < 2:
        raise ValueError("k must be >= 2")
    if bridges is None:
        bridges = [(1, k), (k - 1, k)]

    edges = []
    for offset in (0, k):
        for u in range(k):
            for v in range(u + 1, k):
                edges.append((offset + u, offset + v))
    edges.extend(bridges)
    return Graph(2 * k, edges)
