"""
Check whether a graph is P4-sparse.

Usage:
    p4sparse GRAPH [--format {adj,g6}] [--weighted] [--processes N]
                   [--batch-size N] [--witness] [--draw PNG] [-v]

GRAPH is an adjacency text file ('id = n1 n2 ...' per line) or, with
--format g6, a file whose first non-empty line is a graph6 string.

Exit status: 0 if P4-sparse, 1 if not, 2 on unreadable input.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

import networkx as nx

from p4sparse.io.adjtext import load_adjlist_file
from p4sparse.io.graph6 import g6_to_adjlist
from p4sparse.search.parallel import find_violation_parallel


SPARSE_MSG = "The graph is P4-sparse."
NOT_SPARSE_MSG = "The graph is NOT P4-sparse."


def _load(path: str, fmt: str, weighted: bool) -> Tuple[List[List[int]], List[int]]:
    if fmt == "g6":
        with open(path, "r", encoding="ascii") as fh:
            lines = [ln.strip() for ln in fh if ln.strip()]
        if not lines:
            raise ValueError("no graph6 string found")
        try:
            adj = g6_to_adjlist(lines[0])
        except nx.NetworkXError as exc:
            raise ValueError(f"invalid graph6: {exc}") from exc
        return adj, list(range(len(adj)))
    return load_adjlist_file(path, weighted=weighted)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="p4sparse", description="Decide whether a graph is P4-sparse.")
    ap.add_argument("graph", help="path to the graph file")
    ap.add_argument("--format", choices=("adj", "g6"), default="adj", help="input format (default: adj)")
    ap.add_argument("--weighted", action="store_true", help="adjacency lines alternate neighbour and weight")
    ap.add_argument("--processes", type=int, default=None, help="worker processes (default: $P4SPARSE_PROCESSES or 1)")
    ap.add_argument("--batch-size", type=int, default=None, help="5-subsets per work item (default: $P4SPARSE_BATCH_SIZE or 500)")
    ap.add_argument("--witness", action="store_true", help="print a violating 5-subset and its P4s")
    ap.add_argument("--draw", metavar="PNG", default=None, help="save a drawing of the violating 5-subset")
    ap.add_argument("-v", "--verbose", action="store_true", help="progress on stderr")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        adj, vertices = _load(args.graph, args.format, args.weighted)
    except FileNotFoundError:
        print(f"File not found, check the path: {args.graph}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"{args.graph}: cannot read: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"{args.graph}: {exc}", file=sys.stderr)
        return 2

    try:
        violation = find_violation_parallel(
            adj,
            vertices,
            processes=args.processes,
            batch_size=args.batch_size,
            verbose=args.verbose or None,
        )
    except ValueError as exc:
        print(f"p4sparse: {exc}", file=sys.stderr)
        return 2

    if violation is None:
        print(SPARSE_MSG)
        return 0

    print(NOT_SPARSE_MSG)
    if args.witness:
        print(f"5-subset: {list(violation.five)}")
        for four in violation.p4s:
            print(f"  induced P4: {list(four)}")
    if args.draw:
        from p4sparse.viz.draw import draw_violation

        draw_violation(adj, violation, save_path=args.draw)
    return 1


if __name__ == "__main__":
    sys.exit(main())
