"""Route reconstruction from predecessor links."""

from __future__ import annotations

from typing import List

from ..core.point import Point
from .node_state import SearchState


def reconstruct_path(state: SearchState, end: Point) -> List[Point]:
    """Return the route from ``end`` back to the search origin.

    The first element is ``end`` and the last is the cell without a parent.
    """

    node = state.node(end)
    if not node.walked:
        raise ValueError(f"{end} was never reached; no route to reconstruct")

    path = [end]
    while node.parent is not None:
        path.append(node.parent)
        node = state.node(node.parent)
    return path


__all__ = ["reconstruct_path"]
