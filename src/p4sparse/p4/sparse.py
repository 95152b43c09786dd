from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from p4sparse.graph.adjacency import Adjacency, dedupe_vertices, vertex_ids
from p4sparse.p4.classify import p4_subsets_in_5


@dataclass(frozen=True)
class Violation:
    """
    A 5-vertex set containing more than one induced P4.

    five: the 5 vertices, ascending
    p4s:  the 4-vertex subsets of *five* that induce a P4
    """

    five: Tuple[int, ...]
    p4s: Tuple[Tuple[int, ...], ...]

    @property
    def count(self) -> int:
        return len(self.p4s)


def five_subsets(vertices: Iterable[int]) -> Iterator[Tuple[int, ...]]:
    """
    Lazily yield every 5-combination of the (deduplicated) vertices exactly once,
    in lexicographic index order.
    """
    return combinations(dedupe_vertices(vertices), 5)


def check_five(five: Sequence[int], adj: Adjacency) -> Optional[Violation]:
    """
    Violation for *five* if it holds more than one induced P4, else None.
    """
    p4s = p4_subsets_in_5(five, adj)
    if len(p4s) > 1:
        return Violation(five=tuple(sorted(five)), p4s=tuple(p4s))
    return None


def _resolve_vertices(adj: Adjacency, vertices: Optional[Iterable[int]]) -> list[int]:
    if vertices is None:
        return vertex_ids(adj)
    return dedupe_vertices(vertices)


def find_violation(
    adj: Adjacency,
    vertices: Optional[Iterable[int]] = None,
) -> Optional[Violation]:
    """
    First 5-subset (in enumeration order) with more than one induced P4, or None.
    """
    verts = _resolve_vertices(adj, vertices)
    if len(verts) < 5:
        return None
    for five in five_subsets(verts):
        v = check_five(five, adj)
        if v is not None:
            return v
    return None


def is_p4_sparse(adj: Adjacency, vertices: Optional[Iterable[int]] = None) -> bool:
    """
    True iff every 5 vertices of the graph contain at most one induced P4.

    vertices defaults to every id with an entry in adj. Graphs with fewer
    than 5 vertices are trivially P4-sparse. Exhaustive, O(n^5).
    """
    return find_violation(adj, vertices) is None


def count_violations(adj: Adjacency, vertices: Optional[Iterable[int]] = None) -> int:
    """
    Number of violating 5-subsets. Does not short-circuit.
    """
    verts = _resolve_vertices(adj, vertices)
    return sum(1 for five in five_subsets(verts) if check_five(five, adj) is not None)
