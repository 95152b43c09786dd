from .adjtext import (
    AdjListFormatError,
    parse_node_line,
    read_adjlist_text,
    load_adjlist_file,
)
from .graph6 import g6_to_nx, g6_to_adjlist, nx_to_adjlist, adjlist_to_nx

__all__ = [
    "AdjListFormatError",
    "parse_node_line",
    "read_adjlist_text",
    "load_adjlist_file",
    "g6_to_nx",
    "g6_to_adjlist",
    "nx_to_adjlist",
    "adjlist_to_nx",
]
