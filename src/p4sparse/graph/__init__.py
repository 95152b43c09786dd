from .adjacency import (
    Adjacency,
    neighbors,
    vertex_ids,
    dedupe_vertices,
    edges_from_adj,
    is_symmetric,
    symmetrize,
    induced_degree,
)

__all__ = [
    "Adjacency",
    "neighbors",
    "vertex_ids",
    "dedupe_vertices",
    "edges_from_adj",
    "is_symmetric",
    "symmetrize",
    "induced_degree",
]
