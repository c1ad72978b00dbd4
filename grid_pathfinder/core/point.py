"""Grid coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D cell coordinate."""

    x: int
    y: int

    def distance(self, other: Point) -> int:
        """Return the Manhattan distance to ``other``."""

        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


__all__ = ["Point"]
