from __future__ import annotations

import sys
from math import comb
from multiprocessing import Pool
from typing import Iterable, List, Optional, Tuple

from p4sparse.config import SearchOptions
from p4sparse.graph.adjacency import Adjacency, dedupe_vertices, vertex_ids
from p4sparse.p4.sparse import Violation, check_five, find_violation, five_subsets


_GRAPH: Adjacency = ()


def _worker_init(adj: Adjacency) -> None:
    global _GRAPH
    _GRAPH = adj


def _worker(batch: List[Tuple[int, ...]]) -> Optional[Violation]:
    """
    First violation within one batch of 5-subsets, or None.
    """
    for five in batch:
        v = check_five(five, _GRAPH)
        if v is not None:
            return v
    return None


def _chunked(it: Iterable[Tuple[int, ...]], size: int) -> Iterable[List[Tuple[int, ...]]]:
    buf: List[Tuple[int, ...]] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def find_violation_parallel(
    adj: Adjacency,
    vertices: Optional[Iterable[int]] = None,
    *,
    processes: Optional[int] = None,
    batch_size: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> Optional[Violation]:
    """
    Search all 5-subsets for a violation using a process pool.

    Unset arguments fall back to SearchOptions.from_env(). The first violation
    reported by any worker is returned and the pool is terminated without
    waiting for outstanding batches. With processes == 1 this is find_violation.

    The returned violation is not necessarily the first in enumeration order,
    but None is returned iff the graph is P4-sparse.
    """
    opts = SearchOptions.from_env(processes=processes, batch_size=batch_size, verbose=verbose)
    verts = vertex_ids(adj) if vertices is None else dedupe_vertices(vertices)

    if opts.verbose:
        print(
            f"[p4sparse] n={len(verts)}: {comb(len(verts), 5)} 5-subsets, "
            f"processes={opts.processes}",
            file=sys.stderr,
        )

    if opts.processes <= 1 or len(verts) < 5:
        res = find_violation(adj, verts)
    else:
        res = None
        with Pool(processes=opts.processes, initializer=_worker_init, initargs=(adj,)) as pool:
            batches = _chunked(five_subsets(verts), opts.batch_size)
            for found in pool.imap_unordered(_worker, batches, chunksize=1):
                if found is not None:
                    res = found
                    break

    if opts.verbose:
        if res is None:
            print("[p4sparse] no violating 5-subset found.", file=sys.stderr)
        else:
            print(f"[p4sparse] violation at {list(res.five)} ({res.count} P4s).", file=sys.stderr)
    return res


def is_p4_sparse_parallel(
    adj: Adjacency,
    vertices: Optional[Iterable[int]] = None,
    *,
    processes: Optional[int] = None,
    batch_size: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> bool:
    return find_violation_parallel(
        adj,
        vertices,
        processes=processes,
        batch_size=batch_size,
        verbose=verbose,
    ) is None
