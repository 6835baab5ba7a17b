from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from graphclass.cycles.simple import simple_cycles
from graphclass.model.adjacency import AdjacencyGraph
from graphclass.properties.predicates import GraphProperties, recompute


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Planar layout when G is planar, spring layout otherwise.
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar and G.number_of_nodes() > 0:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def cycle_edges(path: str, sep: str = "-") -> list[tuple[str, str]]:
    """
    Consecutive vertex pairs of a rendered cycle path such as 'A-B-C-A'.

    The path lists the cycle's vertex set in sorted order, so the pairs are
    only real edges when the cycle happens to be traversed in that order;
    pairs missing from the graph are left out when drawing.
    """
    if not path:
        return []
    verts = path.split(sep)
    return list(zip(verts, verts[1:]))


def draw_classified(
    graph: AdjacencyGraph,
    *,
    props: GraphProperties | None = None,
    seed: int = 7,
    node_size: int = 400,
    edge_width: float = 1.2,
    save_path: str | None = None,
):
    """
    Draw *graph* with its verdicts in the title. Vertices of the
    representative cycle, if any, are highlighted.

    If save_path is set, the figure is saved as PNG and closed; otherwise
    it is shown.
    """
    if props is None:
        props = recompute(graph)
    G = graph.to_networkx()
    pos = base_layout(G, seed=seed)

    record = simple_cycles(graph)
    on_cycle = set(record.path.split("-")) if record.path else set()
    colors = ["tab:red" if v in on_cycle else "tab:blue" for v in G.nodes()]
    highlight = [(u, w) for u, w in cycle_edges(record.path) if G.has_edge(u, w)]

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(
        f"|V|={G.number_of_nodes()}  |E|={graph.edge_count()}  "
        f"tree={props.is_tree}  numbered tree={props.is_numbered_tree}"
    )
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        with_labels=True,
        node_color=colors,
        node_size=node_size,
        width=edge_width,
    )
    if highlight:
        nx.draw_networkx_edges(G, pos=pos, ax=ax, edgelist=highlight, edge_color="tab:red", width=2 * edge_width)

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
