"""Per-cell search bookkeeping kept in a flat, coordinate-indexed arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.point import Point


@dataclass
class NodeState:
    """Mutable search record for a single cell.

    ``total`` always equals ``moved + to_move`` once ``walked`` is set.
    """

    moved: int = 0
    to_move: int = 0
    total: int = 0
    parent: Optional[Point] = None
    walked: bool = False

    def update(self, moved: int, to_move: int, parent: Optional[Point]) -> None:
        self.moved = moved
        self.to_move = to_move
        self.total = moved + to_move
        self.parent = parent
        self.walked = True


class SearchState:
    """Dense arena of :class:`NodeState` sized to a ``width`` × ``height`` grid."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._nodes: List[NodeState] = [NodeState() for _ in range(width * height)]

    def index(self, p: Point) -> int:
        return p.y * self.width + p.x

    def point(self, index: int) -> Point:
        return Point(index % self.width, index // self.width)

    def node(self, p: Point) -> NodeState:
        return self._nodes[self.index(p)]

    def at(self, index: int) -> NodeState:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)


__all__ = ["NodeState", "SearchState"]
