from __future__ import annotations

from typing import List, Optional, Tuple

import networkx as nx
import matplotlib.pyplot as plt

from p4sparse.graph.adjacency import Adjacency
from p4sparse.io.graph6 import adjlist_to_nx
from p4sparse.p4.sparse import Violation


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Circular layout for small induced subgraphs, spring layout otherwise.
    """
    if G.number_of_nodes() <= 6:
        return nx.circular_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def _path_edges(H: nx.Graph, four: Tuple[int, ...]) -> List[Tuple[int, int]]:
    return sorted(tuple(sorted(e)) for e in H.subgraph(four).edges())


def draw_violation(
    adj: Adjacency,
    violation: Violation,
    *,
    seed: int = 7,
    node_size: int = 400,
    edge_width: float = 1.2,
    save_path: Optional[str] = None,
) -> List[List[Tuple[int, int]]]:
    """
    Draw the subgraph induced on a violating 5-set, one panel per induced P4
    with the path's edges and vertices highlighted.

    If save_path is set the figure is written there as PNG, otherwise shown.
    Returns the highlighted edge list of each panel.
    """
    H = adjlist_to_nx(adj).subgraph(violation.five).copy()
    pos = base_layout(H, seed=seed)

    k = len(violation.p4s)
    fig, axes = plt.subplots(1, k, figsize=(4 * k, 4), squeeze=False)

    highlighted: List[List[Tuple[int, int]]] = []
    for ax, four in zip(axes[0], violation.p4s):
        path = _path_edges(H, four)
        highlighted.append(path)

        ax.set_title(f"P4 on {list(four)}")
        ax.set_axis_off()
        nx.draw_networkx_edges(H, pos=pos, ax=ax, width=edge_width, edge_color="lightgray")
        nx.draw_networkx_edges(H, pos=pos, ax=ax, edgelist=path, width=2.5 * edge_width, edge_color="tab:red")
        colors = ["tab:red" if v in four else "lightgray" for v in H.nodes()]
        nx.draw_networkx_nodes(H, pos=pos, ax=ax, node_color=colors, node_size=node_size)
        nx.draw_networkx_labels(H, pos=pos, ax=ax)

    fig.suptitle(f"{list(violation.five)}: {k} induced P4s")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return highlighted
