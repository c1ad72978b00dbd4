"""A* shortest-path search over a :class:`~grid_pathfinder.core.grid.Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.grid import Grid, GridError
from ..core.point import Point
from .frontier import Frontier
from .node_state import SearchState
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

STEP_COST = 1


@dataclass
class SearchResult:
    """Outcome of a single :func:`search` call.

    ``route`` runs start to end and is empty when no path exists. ``trail`` is
    the same cells in end-to-start order.
    """

    found: bool
    route: List[Point] = field(default_factory=list)
    expanded: int = 0
    pushed: int = 0

    @property
    def length(self) -> Optional[int]:
        """Number of steps in the route, or ``None`` if not found."""
        return len(self.route) - 1 if self.found else None

    @property
    def trail(self) -> List[Point]:
        return list(reversed(self.route))

    def __bool__(self) -> bool:
        return self.found


def _check_endpoints(grid: Grid, start: Point, end: Point) -> None:
    for name, p in (("start", start), ("end", end)):
        if not grid.in_bounds(p):
            raise GridError(f"{name} {p} is outside a {grid.width}x{grid.height} grid")
        if grid.is_blocked(p):
            raise GridError(f"{name} {p} is a blocked cell")
    if start == end:
        raise GridError(f"start and end must differ, both are {start}")


def search(
    grid: Grid, start: Point | None = None, end: Point | None = None
) -> SearchResult:
    """Return the shortest route from ``start`` to ``end`` on ``grid``.

    ``start`` and ``end`` default to the grid's own endpoints. Every step
    costs one and the Manhattan distance to ``end`` is the heuristic, so the
    first time ``end`` is popped its cost is optimal. A missing route is a
    normal :class:`SearchResult` with ``found=False``.
    """

    start = grid.start if start is None else start
    end = grid.end if end is None else end
    _check_endpoints(grid, start, end)

    state = SearchState(grid.width, grid.height)
    frontier = Frontier()

    origin = state.node(start)
    origin.update(0, start.distance(end), None)
    frontier.push(origin.total, state.index(start))
    logger.info("A* search %s -> %s on %dx%d grid", start, end, grid.width, grid.height)

    expanded = 0
    while frontier:
        total, index = frontier.pop()
        current = state.at(index)
        if total != current.total:
            # superseded by a cheaper entry pushed later
            continue

        point = state.point(index)
        if point == end:
            route = reconstruct_path(state, end)
            route.reverse()
            logger.info(
                "Route found: %d step(s), %d node(s) expanded, %d push(es)",
                current.moved, expanded, frontier.pushed,
            )
            return SearchResult(True, route, expanded, frontier.pushed)

        expanded += 1
        for nb in grid.neighbors(point):
            if grid.is_blocked(nb):
                continue
            moved = current.moved + STEP_COST
            to_move = nb.distance(end)
            dealing = state.node(nb)
            if not dealing.walked or moved + to_move < dealing.total:
                dealing.update(moved, to_move, point)
                logger.debug(
                    "relax %s: moved=%d to_move=%d total=%d",
                    nb, moved, to_move, dealing.total,
                )
                frontier.push(dealing.total, state.index(nb))

    logger.info(
        "No route from %s to %s after expanding %d node(s)", start, end, expanded
    )
    return SearchResult(False, [], expanded, frontier.pushed)


__all__ = ["STEP_COST", "SearchResult", "search"]
