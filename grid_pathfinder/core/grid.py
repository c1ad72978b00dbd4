"""Static grid model holding per-cell attributes."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence

from .point import Point


class GridError(ValueError):
    """Raised when a grid or a pair of endpoints is malformed."""


class CellAttr(IntEnum):
    """Attribute assigned to every cell at construction time."""

    FREE = 0
    BLOCK = 1
    START = 2
    END = 3


class Grid:
    """Fixed ``width`` × ``height`` map of :class:`CellAttr` values.

    ``cells`` is stored row-major (``cells[y][x]``). The grid is never mutated
    after construction; searches keep their own bookkeeping.
    """

    def __init__(self, cells: Sequence[Sequence[CellAttr]]) -> None:
        if not cells or not cells[0]:
            raise GridError("grid must have positive width and height")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise GridError("grid rows must all have the same width")

        self.width: int = width
        self.height: int = len(cells)
        self._cells: List[List[CellAttr]] = [
            [CellAttr(value) for value in row] for row in cells
        ]

        starts = self._find(CellAttr.START)
        ends = self._find(CellAttr.END)
        if len(starts) != 1 or len(ends) != 1:
            raise GridError(
                f"grid needs exactly one start and one end, got "
                f"{len(starts)} start(s) and {len(ends)} end(s)"
            )
        self.start: Point = starts[0]
        self.end: Point = ends[0]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find(self, attr: CellAttr) -> List[Point]:
        return [
            Point(x, y)
            for y, row in enumerate(self._cells)
            for x, value in enumerate(row)
            if value is attr
        ]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def attribute(self, p: Point) -> CellAttr:
        """Return the attribute of ``p``; raise ``IndexError`` if outside."""

        if not self.in_bounds(p):
            raise IndexError(f"{p} is outside a {self.width}x{self.height} grid")
        return self._cells[p.y][p.x]

    def is_blocked(self, p: Point) -> bool:
        return self.attribute(p) is CellAttr.BLOCK

    def neighbors(self, p: Point) -> List[Point]:
        """Return in-bounds orthogonal neighbours of ``p``.

        Order is west, north, east, south so traces are reproducible.
        """

        points: List[Point] = []
        if p.x > 0:
            points.append(Point(p.x - 1, p.y))
        if p.y > 0:
            points.append(Point(p.x, p.y - 1))
        if p.x < self.width - 1:
            points.append(Point(p.x + 1, p.y))
        if p.y < self.height - 1:
            points.append(Point(p.x, p.y + 1))
        return points

    def rows(self) -> List[List[CellAttr]]:
        """Return a copy of the attribute rows."""

        return [list(row) for row in self._cells]

    def count(self, attr: CellAttr) -> int:
        return sum(row.count(attr) for row in self._cells)

    def __repr__(self) -> str:
        return (
            f"Grid({self.width}x{self.height}, start={self.start.as_tuple()}, "
            f"end={self.end.as_tuple()})"
        )


__all__ = ["CellAttr", "Grid", "GridError"]
