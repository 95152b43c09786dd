"""
Report whether a graph stored in the adjacency text format is P4-sparse.

Usage:
    python check_file.py [PATH] [--weighted]
"""
from __future__ import annotations

import argparse
import os

from p4sparse.io.adjtext import load_adjlist_file
from p4sparse.p4.sparse import find_violation


DEFAULT = os.path.join(os.path.dirname(__file__), "data", "graph01.txt")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("path", nargs="?", default=DEFAULT)
    ap.add_argument("--weighted", action="store_true")
    args = ap.parse_args()

    adj, vertices = load_adjlist_file(args.path, weighted=args.weighted)
    print(f"{args.path}: {len(vertices)} vertices")

    v = find_violation(adj, vertices)
    if v is None:
        print("The graph is P4-sparse.")
    else:
        print("The graph is NOT P4-sparse.")
        print(f"  {list(v.five)} induces {v.count} P4s: {[list(p) for p in v.p4s]}")


if __name__ == "__main__":
    main()
