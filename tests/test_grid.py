import pytest

from aoc2024.geometry import Bounds, Position
from aoc2024.grid import Grid

LINES = ["aab", "abb", "ccb"]


def test_from_lines_bounds_and_values():
    grid = Grid.from_lines(["abc", "def"])
    assert grid.bounds == Bounds(3, 2)
    assert grid[Position(2, 1)] == "f"
    assert grid[Position(0, 0)] == "a"


def test_from_lines_empty_rejected():
    with pytest.raises(ValueError):
        Grid.from_lines([])


def test_positions_order_and_count():
    grid = Grid.from_lines(["abc", "def"])
    positions = list(grid.positions())
    assert len(positions) == 6
    assert len(set(positions)) == 6
    assert positions[:2] == [Position(0, 0), Position(0, 1)]


def test_pretty_round_trip():
    assert Grid.from_lines(LINES).pretty() == "\n".join(LINES)


def test_map_and_convert():
    lines = ["012", "345"]
    grid = Grid.from_lines(lines, int)
    assert grid[Position(1, 1)] == 4
    assert grid.pretty() == "\n".join(lines)
    doubled = grid.map(lambda v: v * 2)
    assert all(doubled[p] == 2 * grid[p] for p in grid.positions())


def test_setitem():
    grid = Grid.from_lines(LINES)
    grid[Position(1, 2)] = "z"
    assert grid[Position(1, 2)] == "z"
    assert grid.find("z") == {Position(1, 2)}


def test_out_of_bounds_access():
    grid = Grid.from_lines(LINES)
    with pytest.raises(IndexError):
        grid[Position(-1, 0)]
    with pytest.raises(IndexError):
        grid[Position(3, 0)] = "x"


def test_find():
    grid = Grid.from_lines(LINES)
    found = grid.find("c")
    assert found == {Position(0, 2), Position(1, 2)}
    assert grid.find("q") == set()


def test_contiguous_region():
    grid = Grid.from_lines(LINES)
    region = grid.contiguous_region(Position(0, 0))
    assert region == {Position(0, 0), Position(1, 0), Position(0, 1)}
    assert all(grid[p] == "a" for p in region)


def test_regions_partition_grid():
    grid = Grid.from_lines(LINES)
    covered: set[Position] = set()
    for pos in grid.positions():
        region = grid.contiguous_region(pos)
        assert pos in region
        assert all(grid[p] == grid[pos] for p in region)
        covered |= region
    assert covered == set(grid.positions())


def test_filled():
    grid = Grid.filled(Bounds(4, 3), ".")
    assert grid.bounds == Bounds(4, 3)
    assert grid.find(".") == set(grid.positions())
    grid[Position(0, 0)] = "#"
    assert grid[Position(1, 0)] == "."