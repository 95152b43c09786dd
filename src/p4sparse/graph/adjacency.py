from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence, Tuple, Union

# adj[v] = neighbours of v, either list-indexed or keyed by vertex id
Adjacency = Union[Sequence[Sequence[int]], Mapping[int, Sequence[int]]]


def neighbors(adj: Adjacency, v: int) -> Sequence[int]:
    """
    Neighbours of v. Ids with no entry in adj are isolated vertices.
    """
    if isinstance(adj, Mapping):
        return adj.get(v, ())
    if 0 <= v < len(adj):
        return adj[v]
    return ()


def vertex_ids(adj: Adjacency) -> List[int]:
    """
    Ids that have an entry in adj (0..n-1 for list form).
    """
    if isinstance(adj, Mapping):
        return sorted(adj)
    return list(range(len(adj)))


def dedupe_vertices(vertices: Iterable[int]) -> List[int]:
    seen: set[int] = set()
    out: List[int] = []
    for v in vertices:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def edges_from_adj(adj: Adjacency) -> List[Tuple[int, int]]:
    """
    Return undirected edges as (u,v) with u < v.

    An edge listed from only one side is still reported once.
    """
    eds: set[Tuple[int, int]] = set()
    for u in vertex_ids(adj):
        for v in neighbors(adj, u):
            if u == v:
                continue
            eds.add((u, v) if u < v else (v, u))
    return sorted(eds)


def is_symmetric(adj: Adjacency) -> bool:
    for u in vertex_ids(adj):
        for v in neighbors(adj, u):
            if u not in neighbors(adj, v):
                return False
    return True


def symmetrize(adj: Adjacency) -> List[List[int]]:
    """
    Return a new list-form adjacency where every edge is listed from both ends.
    Self-loops and repeated neighbours are dropped.
    """
    ids = vertex_ids(adj)
    n = 0
    for u in ids:
        n = max(n, u + 1, *(v + 1 for v in neighbors(adj, u)))
    sets: List[set[int]] = [set() for _ in range(n)]
    for u, v in edges_from_adj(adj):
        sets[u].add(v)
        sets[v].add(u)
    return [sorted(s) for s in sets]


def induced_degree(adj: Adjacency, v: int, subset: Sequence[int]) -> int:
    """
    Number of neighbours of v that belong to subset.
    """
    members = set(subset)
    return sum(1 for w in neighbors(adj, v) if w in members)
