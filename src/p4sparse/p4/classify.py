from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from p4sparse.graph.adjacency import Adjacency, induced_degree
from p4sparse.p4.acyclic import NO_PARENT, is_acyclic_on_subset


def _check_size(vs: Sequence[int], k: int) -> None:
    if len(vs) != k or len(set(vs)) != k:
        raise ValueError(f"expected {k} distinct vertices, got {list(vs)!r}")


def is_induced_p4(subset: Sequence[int], adj: Adjacency) -> bool:
    """
    Decide whether 4 vertices induce a path P4.

    On exactly four vertices, "acyclic, connected, max induced degree <= 2"
    is the path and nothing else: the only other 4-vertex tree is the star
    K1,3, whose centre has degree 3.
    """
    _check_size(subset, 4)

    visited: Set[int] = set()
    if not is_acyclic_on_subset(adj, subset, subset[0], NO_PARENT, visited):
        return False
    if len(visited) < len(subset):
        return False

    for v in subset:
        if induced_degree(adj, v, subset) > 2:
            return False
    return True


def four_subsets(five: Sequence[int]) -> List[Tuple[int, ...]]:
    """
    The five 4-vertex subsets of *five*, in omission order (omit five[0], five[1], ...).
    Each subset is sorted ascending.
    """
    five = tuple(five)
    return [tuple(sorted(five[:i] + five[i + 1:])) for i in range(len(five))]


def p4_subsets_in_5(five: Sequence[int], adj: Adjacency) -> List[Tuple[int, ...]]:
    """
    Omission subsets of a 5-vertex set that induce a P4.
    """
    _check_size(five, 5)
    return [sub for sub in four_subsets(five) if is_induced_p4(sub, adj)]


def count_induced_p4s_in_5(five: Sequence[int], adj: Adjacency) -> int:
    """
    Number of induced P4s among the five 4-vertex subsets of *five* (0..5).
    """
    return len(p4_subsets_in_5(five, adj))
