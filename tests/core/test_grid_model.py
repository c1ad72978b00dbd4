import pytest

from grid_pathfinder.core.grid import CellAttr, Grid, GridError
from grid_pathfinder.core.generation import grid_from_rows
from grid_pathfinder.core.point import Point


def test_point_distance_and_equality():
    assert Point(0, 0).distance(Point(2, 3)) == 5
    assert Point(4, 1).distance(Point(1, 4)) == 6
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_point_is_immutable():
    p = Point(1, 1)
    with pytest.raises(AttributeError):
        p.x = 3  # type: ignore[misc]


def test_grid_finds_endpoints_and_size():
    grid = grid_from_rows(["o*o", "@o#"])
    assert grid.size == (3, 2)
    assert grid.start == Point(0, 1)
    assert grid.end == Point(2, 1)
    assert grid.attribute(Point(1, 0)) is CellAttr.BLOCK
    assert grid.is_blocked(Point(1, 0))
    assert not grid.is_blocked(Point(0, 0))


def test_neighbors_order_west_north_east_south():
    grid = grid_from_rows(["ooo", "o@o", "oo#"])
    assert grid.neighbors(Point(1, 1)) == [
        Point(0, 1),
        Point(1, 0),
        Point(2, 1),
        Point(1, 2),
    ]


def test_neighbors_stay_in_bounds():
    grid = grid_from_rows(["@o", "o#"])
    assert grid.neighbors(Point(0, 0)) == [Point(1, 0), Point(0, 1)]
    assert grid.neighbors(Point(1, 1)) == [Point(0, 1), Point(1, 0)]
    single_row = grid_from_rows(["@o#"])
    assert single_row.neighbors(Point(1, 0)) == [Point(0, 0), Point(2, 0)]


def test_attribute_out_of_bounds_raises():
    grid = grid_from_rows(["@#"])
    with pytest.raises(IndexError):
        grid.attribute(Point(2, 0))
    with pytest.raises(IndexError):
        grid.attribute(Point(0, -1))


def test_rows_returns_copy():
    grid = grid_from_rows(["@#"])
    rows = grid.rows()
    rows[0][0] = CellAttr.BLOCK
    assert grid.attribute(Point(0, 0)) is CellAttr.START


@pytest.mark.parametrize(
    "cells",
    [
        [],
        [[]],
        [[CellAttr.START, CellAttr.END], [CellAttr.FREE]],
        [[CellAttr.START, CellAttr.FREE]],
        [[CellAttr.START, CellAttr.START, CellAttr.END]],
        [[CellAttr.START, CellAttr.END, CellAttr.END]],
    ],
)
def test_malformed_grids_rejected(cells):
    with pytest.raises(GridError):
        Grid(cells)


def test_grid_error_is_value_error():
    assert issubclass(GridError, ValueError)
