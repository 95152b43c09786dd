"""
Reader for the plain-text adjacency format

    0 = 1 2
    1 = 0
    2 = 0
    3 =

one vertex per line: its id, '=', then its neighbours separated by spaces.
In a weighted file the neighbour list alternates `neighbour weight`; weights
are skipped; a trailing neighbour without a weight is kept.
"""
from __future__ import annotations

import os
from typing import Iterable, List, Optional, Tuple, Union


class AdjListFormatError(ValueError):
    """Malformed line in an adjacency text file."""

    def __init__(self, msg: str, lineno: Optional[int] = None):
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
        self.lineno = lineno


def _parse_id(tok: str, what: str) -> int:
    try:
        v = int(tok)
    except ValueError:
        raise AdjListFormatError(f"{what} {tok!r} is not an integer") from None
    if v < 0:
        raise AdjListFormatError(f"{what} {v} is negative")
    return v


def parse_node_line(line: str, *, weighted: bool = False) -> Tuple[int, List[int]]:
    """
    Parse one 'id = n1 n2 ...' line into (id, neighbours).
    """
    head, sep, tail = line.partition("=")
    head = head.strip()
    if not head:
        raise AdjListFormatError(f"missing vertex id in {line.strip()!r}")
    if "=" in tail:
        raise AdjListFormatError(f"more than one '=' in {line.strip()!r}")
    node = _parse_id(head, "vertex id")

    toks = tail.split() if sep else []
    if weighted:
        toks = toks[::2]
    return node, [_parse_id(t, "neighbour") for t in toks]


def read_adjlist_text(
    lines: Iterable[str],
    *,
    weighted: bool = False,
) -> Tuple[List[List[int]], List[int]]:
    """
    Build (adj, vertices) from adjacency text lines.

    adj covers ids 0..max referenced id; ids without a line get an empty list.
    vertices lists the ids that have a line, in order of first appearance.
    A later line for the same id replaces the earlier neighbour list.
    Blank lines are ignored.
    """
    adj: List[List[int]] = []
    vertices: List[int] = []
    seen: set[int] = set()

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            node, nbrs = parse_node_line(line, weighted=weighted)
        except AdjListFormatError as exc:
            raise AdjListFormatError(str(exc), lineno) from None

        top = max([node, *nbrs])
        if top >= len(adj):
            adj.extend([] for _ in range(top + 1 - len(adj)))
        adj[node] = nbrs

        if node not in seen:
            seen.add(node)
            vertices.append(node)

    return adj, vertices


def load_adjlist_file(
    path: Union[str, os.PathLike],
    *,
    weighted: bool = False,
) -> Tuple[List[List[int]], List[int]]:
    """
    Read an adjacency text file. A missing file raises FileNotFoundError.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return read_adjlist_text(fh, weighted=weighted)
