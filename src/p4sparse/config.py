from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SearchOptions:
    processes: int = 1
    batch_size: int = 500
    verbose: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "SearchOptions":
        """
        Options from P4SPARSE_PROCESSES / P4SPARSE_BATCH_SIZE, read at call time.
        Keyword overrides that are not None take precedence.
        """
        try:
            opts = cls(
                processes=int(os.environ.get("P4SPARSE_PROCESSES", "1")),
                batch_size=int(os.environ.get("P4SPARSE_BATCH_SIZE", "500")),
            )
        except ValueError as exc:
            raise ValueError(f"invalid P4SPARSE_* environment setting: {exc}") from exc
        opts = replace(opts, **{k: v for k, v in overrides.items() if v is not None})
        if opts.processes < 1:
            raise ValueError("processes must be >= 1.")
        if opts.batch_size < 1:
            raise ValueError("batch_size must be >= 1.")
        return opts
