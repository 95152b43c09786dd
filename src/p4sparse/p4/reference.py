"""
NetworkX reference implementation, used to cross-check the adjacency-list core.
"""
from __future__ import annotations

from itertools import combinations
from typing import Hashable, Iterable

import networkx as nx


_P4 = nx.path_graph(4)


def is_induced_p4_nx(G: nx.Graph, nodes: Iterable[Hashable]) -> bool:
    H = G.subgraph(nodes)
    if H.number_of_nodes() != 4 or H.number_of_edges() != 3:
        return False
    return nx.is_isomorphic(H, _P4)


def count_induced_p4s_in_5_nx(G: nx.Graph, five: Iterable[Hashable]) -> int:
    return sum(1 for four in combinations(list(five), 4) if is_induced_p4_nx(G, four))


def is_p4_sparse_nx(G: nx.Graph) -> bool:
    """
    Brute-force P4-sparsity test on a NetworkX graph via isomorphism checks.
    """
    for five in combinations(list(G.nodes()), 5):
        if count_induced_p4s_in_5_nx(G, five) > 1:
            return False
    return True
