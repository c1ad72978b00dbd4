"""Grid construction helpers: random maps and explicit glyph layouts."""

from __future__ import annotations

import logging
from random import Random
from typing import Iterable, Mapping

from .grid import CellAttr, Grid, GridError
from .point import Point

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_CHANCE = 0.2

# Glyphs shared by the text parser and the terminal renderer
DEFAULT_GLYPHS: dict[CellAttr, str] = {
    CellAttr.FREE: "o",
    CellAttr.BLOCK: "*",
    CellAttr.START: "@",
    CellAttr.END: "#",
}


def _random_endpoints(width: int, height: int, rnd: Random) -> tuple[Point, Point]:
    while True:
        start = Point(rnd.randrange(width), rnd.randrange(height))
        end = Point(rnd.randrange(width), rnd.randrange(height))
        if start != end:
            return start, end


def generate_grid(
    width: int,
    height: int,
    seed: int | None = None,
    block_chance: float = DEFAULT_BLOCK_CHANCE,
    rng: Random | None = None,
) -> Grid:
    """Return a random ``width`` × ``height`` grid.

    Parameters
    ----------
    width, height:
        Grid dimensions; their product must be at least 2 so that start and
        end can differ.
    seed:
        Optional seed for deterministic output. Ignored when ``rng`` is given.
    block_chance:
        Probability in ``[0, 1)`` that a non-endpoint cell is blocked.
    rng:
        Explicit random source, e.g. to draw several grids from one stream.
    """

    if width <= 0 or height <= 0:
        raise GridError("grid must have positive width and height")
    if width * height < 2:
        raise GridError("grid needs at least two cells for distinct endpoints")
    if not 0.0 <= block_chance < 1.0:
        raise GridError(f"block_chance must be in [0, 1), got {block_chance}")

    rnd = rng if rng is not None else Random(seed)
    start, end = _random_endpoints(width, height, rnd)

    cells: list[list[CellAttr]] = []
    for y in range(height):
        row: list[CellAttr] = []
        for x in range(width):
            attr = CellAttr.BLOCK if rnd.random() < block_chance else CellAttr.FREE
            if (x, y) == start.as_tuple():
                attr = CellAttr.START
            elif (x, y) == end.as_tuple():
                attr = CellAttr.END
            row.append(attr)
        cells.append(row)

    grid = Grid(cells)
    logger.debug(
        "Generated %s with %d blocked cell(s)", grid, grid.count(CellAttr.BLOCK)
    )
    return grid


def glyphs_by_attr(names: Mapping[str, str] | None = None) -> dict[CellAttr, str]:
    """Return the cell glyph table with ``names`` overrides applied.

    ``names`` uses the ``render.glyphs`` config keys (``free``, ``block``,
    ``start``, ``end``); other keys are ignored and only the first character
    of each glyph is used, as the renderer does.
    """

    glyphs = dict(DEFAULT_GLYPHS)
    for attr in CellAttr:
        glyph = (names or {}).get(attr.name.lower())
        if glyph:
            glyphs[attr] = glyph[:1]
    return glyphs


def grid_from_rows(
    rows: Iterable[str], glyphs: Mapping[CellAttr, str] = DEFAULT_GLYPHS
) -> Grid:
    """Parse a grid from lines of glyphs; whitespace inside a line is ignored.

    >>> grid_from_rows(["@ * #"]).size
    (3, 1)
    """

    lookup = {glyph: attr for attr, glyph in glyphs.items()}
    cells: list[list[CellAttr]] = []
    for line_no, line in enumerate(rows):
        compact = "".join(line.split())
        if not compact:
            continue
        row: list[CellAttr] = []
        for ch in compact:
            if ch not in lookup:
                raise GridError(f"unknown glyph {ch!r} on line {line_no + 1}")
            row.append(lookup[ch])
        cells.append(row)
    return Grid(cells)


__all__ = [
    "DEFAULT_BLOCK_CHANCE",
    "DEFAULT_GLYPHS",
    "generate_grid",
    "glyphs_by_attr",
    "grid_from_rows",
]
