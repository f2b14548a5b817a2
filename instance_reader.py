import os

from mincut.graph import Edge, Graph


def read_col_instance(path) -> Graph:
    """
    Reads a graph in DIMACS .col format.

        c any comment
        p edge <n> <m>
        e <u> <v>

    Vertices are 1-based in the file and 0-based in the returned graph. Lines
    that are neither a problem line nor an edge line are ignored.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Such instance doesn't exist: {path}")

    graph = Graph(0)
    with open(path) as instance:
        for lineno, line in enumerate(instance, 1):
            fields = line.split()
            if not fields:
                continue
            try:
                if fields[0] == 'p':
                    # p <format> <n> <m>; only n is needed
                    graph.n = int(fields[2])
                elif fields[0] == 'e':
                    # instance files start numbering vertices at 1
                    graph.edges.append(Edge(int(fields[1]) - 1, int(fields[2]) - 1))
            except (IndexError, ValueError) as exc:
                raise ValueError(f"{path}:{lineno}: malformed line {line.strip()!r}") from exc

    return graph


def write_col_instance(graph: Graph, path) -> None:
    with open(path, "w") as out:
        out.write(f"p edge {graph.n} {len(graph.edges)}\n")
        for u, v in graph.edges:
            out.write(f"e {u + 1} {v + 1}\n")
