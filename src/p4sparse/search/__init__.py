from .parallel import find_violation_parallel, is_p4_sparse_parallel

__all__ = [
    "find_violation_parallel",
    "is_p4_sparse_parallel",
]
