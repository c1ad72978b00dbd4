"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path

from ..core.grid import Grid
from ..search.astar import search


def profile_searches(
    n: int,
    grid: Grid,
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``n`` searches on ``grid`` and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to run.
    grid:
        Grid searched between its own start and end each time.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    if n <= 0:
        raise ValueError("number of searches must be positive")
    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        search(grid)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
