from __future__ import annotations

from graphclass.model.adjacency import AdjacencyGraph


def describe_graph(graph: AdjacencyGraph) -> str:
    """Human-readable description of a small graph.

    Returns recognizable names for common connected structures (K1, K2, Pn,
    K1,r, Cn, Kn) and a generic descriptor with vertex/edge counts and
    degree sequence for everything else. Isolated vertices count.
    """
    n = graph.vertex_count()
    m = graph.edge_count()
    if n == 0:
        return "empty"

    deg_seq = sorted((len(graph.neighbors(v)) for v in graph), reverse=True)
    ds_str = "".join(str(d) for d in deg_seq)
    connected = n == 1 or (min(deg_seq) > 0 and _is_connected(graph))

    if not connected:
        return f"Graph({n}v,{m}e,{ds_str})"

    if n == 1:
        return "K1"
    if m == 1 and n == 2:
        return "K2"

    if m == n - 1:
        if all(d <= 2 for d in deg_seq):
            return f"P{n}"
        if deg_seq.count(1) == n - 1:
            return f"K1,{n - 1}"
        return f"Tree({n}v,{ds_str})"

    if all(d == 2 for d in deg_seq) and m == n:
        return f"C{n}"

    if m == n * (n - 1) // 2 and all(d == n - 1 for d in deg_seq):
        return f"K{n}"

    if m == n:
        return f"Unicyclic({n}v,{m}e)"

    return f"Graph({n}v,{m}e)"


def _is_connected(graph: AdjacencyGraph) -> bool:
    start = next(iter(graph))
    seen = {start}
    stack = [start]
    while stack:
        v = stack.pop()
        for nbr in graph.neighbors(v):
            if nbr not in seen:
                seen.add(nbr)
                stack.append(nbr)
    return len(seen) == graph.vertex_count()
