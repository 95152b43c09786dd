from .acyclic import NO_PARENT, is_acyclic_on_subset
from .classify import (
    is_induced_p4,
    four_subsets,
    p4_subsets_in_5,
    count_induced_p4s_in_5,
)
from .sparse import (
    Violation,
    five_subsets,
    check_five,
    find_violation,
    is_p4_sparse,
    count_violations,
)
from .reference import is_induced_p4_nx, count_induced_p4s_in_5_nx, is_p4_sparse_nx

__all__ = [
    "NO_PARENT",
    "is_acyclic_on_subset",
    "is_induced_p4",
    "four_subsets",
    "p4_subsets_in_5",
    "count_induced_p4s_in_5",
    "Violation",
    "five_subsets",
    "check_five",
    "find_violation",
    "is_p4_sparse",
    "count_violations",
    "is_induced_p4_nx",
    "count_induced_p4s_in_5_nx",
    "is_p4_sparse_nx",
]
