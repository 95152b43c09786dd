from __future__ import annotations

from typing import Dict, Hashable, List, Tuple

import networkx as nx

from p4sparse.graph.adjacency import Adjacency, edges_from_adj, vertex_ids


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.
    """
    s = strip_graph6_header(g6)
    return nx.from_graph6_bytes(s.encode("ascii"))


def g6_to_adjlist(g6: str) -> List[List[int]]:
    """
    Parse a graph6 string into a 0..n-1 adjacency list.

    Returns:
      adj[u] = sorted list of neighbors of u
    """
    adj, _mapping = nx_to_adjlist(g6_to_nx(g6))
    return adj


def nx_to_adjlist(G: nx.Graph) -> Tuple[List[List[int]], Dict[Hashable, int]]:
    """
    Relabel G to 0..n-1 and return (adj, mapping original node -> id).

    Nodes are numbered in sorted order when they are mutually comparable,
    otherwise in G's node order. Self-loops are dropped.
    """
    if G.is_directed():
        raise ValueError("directed graphs are not supported")
    if G.is_multigraph():
        raise ValueError("multigraphs are not supported")

    nodes = list(G.nodes())
    try:
        nodes = sorted(nodes)
    except TypeError:
        pass
    mapping = {v: i for i, v in enumerate(nodes)}

    adj: List[List[int]] = [[] for _ in nodes]
    for v in nodes:
        adj[mapping[v]] = sorted(mapping[w] for w in G.neighbors(v) if w != v)
    return adj, mapping


def adjlist_to_nx(adj: Adjacency) -> nx.Graph:
    """
    Simple undirected NetworkX graph on every id of adj (one-sided entries become edges).
    """
    G = nx.Graph()
    G.add_nodes_from(vertex_ids(adj))
    G.add_edges_from(edges_from_adj(adj))
    return G
