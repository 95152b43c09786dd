"""
p4sparse: brute-force recognition of P4-sparse graphs (every 5 vertices induce
at most one P4), with adjacency-text / graph6 loaders, a multiprocessing search,
and a NetworkX reference checker.
"""

from .config import SearchOptions
from .graph.adjacency import (
    neighbors,
    vertex_ids,
    edges_from_adj,
    is_symmetric,
    symmetrize,
)
from .p4.acyclic import NO_PARENT, is_acyclic_on_subset
from .p4.classify import is_induced_p4, count_induced_p4s_in_5, p4_subsets_in_5
from .p4.sparse import Violation, five_subsets, find_violation, is_p4_sparse, count_violations
from .p4.reference import is_p4_sparse_nx
from .search.parallel import find_violation_parallel, is_p4_sparse_parallel
from .io.adjtext import AdjListFormatError, read_adjlist_text, load_adjlist_file
from .io.graph6 import g6_to_nx, g6_to_adjlist, nx_to_adjlist, adjlist_to_nx
from .viz.draw import draw_violation

__all__ = [
    # Config
    "SearchOptions",
    # Graph access
    "neighbors",
    "vertex_ids",
    "edges_from_adj",
    "is_symmetric",
    "symmetrize",
    # Core
    "NO_PARENT",
    "is_acyclic_on_subset",
    "is_induced_p4",
    "count_induced_p4s_in_5",
    "p4_subsets_in_5",
    "Violation",
    "five_subsets",
    "find_violation",
    "is_p4_sparse",
    "count_violations",
    "is_p4_sparse_nx",
    # Search
    "find_violation_parallel",
    "is_p4_sparse_parallel",
    # IO
    "AdjListFormatError",
    "read_adjlist_text",
    "load_adjlist_file",
    "g6_to_nx",
    "g6_to_adjlist",
    "nx_to_adjlist",
    "adjlist_to_nx",
    # Viz
    "draw_violation",
]
