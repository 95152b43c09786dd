from __future__ import annotations

from typing import Optional, Sequence, Set

from p4sparse.graph.adjacency import Adjacency, neighbors


NO_PARENT = -1


def is_acyclic_on_subset(
    adj: Adjacency,
    subset: Sequence[int],
    vertex: int,
    parent: int = NO_PARENT,
    visited: Optional[Set[int]] = None,
) -> bool:
    """
    Depth-first search from *vertex* over the subgraph induced on *subset*.

    Returns False as soon as an in-subset neighbour other than *parent* has
    already been visited (a cycle), True if no cycle is reachable from the
    start vertex.

    *visited* is filled in place so the caller can read off which vertices
    were reached; only the start vertex's component is explored, so an
    acyclic result says nothing about connectivity.
    """
    if visited is None:
        visited = set()
    members = subset if isinstance(subset, (set, frozenset)) else frozenset(subset)
    return _dfs(adj, members, vertex, parent, visited)


def _dfs(adj: Adjacency, members, vertex: int, parent: int, visited: Set[int]) -> bool:
    visited.add(vertex)
    for nbr in neighbors(adj, vertex):
        if nbr == parent or nbr not in members:
            continue
        if nbr in visited:
            return False
        if not _dfs(adj, members, nbr, vertex, visited):
            return False
    return True
