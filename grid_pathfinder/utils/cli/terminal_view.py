"""ASCII terminal renderer for grids and search routes."""

from __future__ import annotations

import sys
from typing import Iterable, Mapping, Sequence, TextIO

from ...core.grid import CellAttr, Grid
from ...core.point import Point


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# name -> (glyph, colour); names match the ``render.glyphs`` config keys
_DEFAULT_STYLE = {
    "free": ("o", "reset"),
    "block": ("*", "red"),
    "start": ("@", "green"),
    "end": ("#", "yellow"),
    "path": ("+", "cyan"),
}

_ATTR_NAMES = {
    CellAttr.FREE: "free",
    CellAttr.BLOCK: "block",
    CellAttr.START: "start",
    CellAttr.END: "end",
}

CELL_SEPARATOR = "   "


class TerminalView:
    """Grid viewer producing the spaced-out text layout, optionally coloured."""

    def __init__(
        self,
        glyphs: Mapping[str, str] | None = None,
        colour: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self.colour = colour
        self.stream = stream
        self._glyphs = {name: glyph for name, (glyph, _) in _DEFAULT_STYLE.items()}
        for name, glyph in (glyphs or {}).items():
            if name in self._glyphs and glyph:
                self._glyphs[name] = glyph[:1]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def glyph(self, name: str) -> str:
        return self._glyphs[name]

    def render_grid(self, grid: Grid) -> str:
        """Return ``grid`` as text, one row per line and blank lines between."""

        return self.render_path(grid, ())

    def render_path(self, grid: Grid, route: Iterable[Point]) -> str:
        """Return ``grid`` as text with ``route`` cells drawn as the path glyph.

        Start and end keep their own glyphs.
        """

        on_route = {p.as_tuple() for p in route}
        lines: list[str] = []
        for y, row in enumerate(grid.rows()):
            cells: list[str] = []
            for x, attr in enumerate(row):
                name = _ATTR_NAMES[attr]
                if attr is CellAttr.FREE and (x, y) in on_route:
                    name = "path"
                cells.append(self._paint(name))
            lines.append(CELL_SEPARATOR.join(cells))
        return "\n\n".join(lines) + "\n"

    def show(self, text: str) -> None:
        """Write ``text`` to the configured stream (``stdout`` by default)."""

        out = self.stream if self.stream is not None else sys.stdout
        out.write(text if text.endswith("\n") else text + "\n")
        out.flush()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _paint(self, name: str) -> str:
        glyph = self._glyphs[name]
        if not self.colour:
            return glyph
        colour = _DEFAULT_STYLE[name][1]
        return f"{_COLOURS.get(colour, '')}{glyph}{_COLOURS['reset']}"


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def format_trail(trail: Sequence[Point]) -> str:
    """Return ``trail`` as ``"(x, y)  (x, y)  "``, in the order given."""

    return "".join(f"({p.x}, {p.y})  " for p in trail)


__all__ = ["CELL_SEPARATOR", "TerminalView", "format_trail"]
