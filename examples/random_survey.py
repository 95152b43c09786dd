"""
Fraction of P4-sparse graphs among G(n, p) samples, checked against the
NetworkX reference implementation.

Usage:
    python random_survey.py [--n N] [--samples S] [--processes P] [--no-reference]
"""
from __future__ import annotations

import argparse
import time

import networkx as nx

from p4sparse.io.graph6 import nx_to_adjlist
from p4sparse.p4.reference import is_p4_sparse_nx
from p4sparse.search.parallel import is_p4_sparse_parallel


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=9)
    ap.add_argument("--samples", type=int, default=50)
    ap.add_argument("--processes", type=int, default=1)
    ap.add_argument("--no-reference", action="store_true")
    args = ap.parse_args()

    for p in (0.1, 0.3, 0.5, 0.7, 0.9):
        t0 = time.time()
        sparse = 0
        for seed in range(args.samples):
            G = nx.gnp_random_graph(args.n, p, seed=seed)
            adj, _ = nx_to_adjlist(G)
            ok = is_p4_sparse_parallel(adj, processes=args.processes)
            if not args.no_reference:
                assert ok == is_p4_sparse_nx(G), f"mismatch at p={p}, seed={seed}"
            sparse += ok
        dt = time.time() - t0
        print(f"n={args.n} p={p:.1f}: {sparse}/{args.samples} P4-sparse  ({dt:.2f}s)")


if __name__ == "__main__":
    main()
