"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import takewhile

from .file_io import lines_from_file
from .geometry import Direction, Position
from .grid import Grid


class Tile(Enum):
    """A square of the narrow warehouse."""

    EMPTY = "."
    BOX = "O"
    WALL = "#"

    @classmethod
    def from_char(cls, char: str) -> Tile:
        try:
            return cls(char)
        except ValueError:
            return cls.EMPTY


class HalfTile(Enum):
    """A square of the wide warehouse, where each box spans two squares."""

    EMPTY = "."
    BOX_LEFT = "["
    BOX_RIGHT = "]"
    WALL = "#"

    @classmethod
    def from_char(cls, char: str) -> HalfTile:
        try:
            return cls(char)
        except ValueError:
            return cls.EMPTY


@dataclass
class _BaseWarehouse:
    room: Grid
    robot: Position

    def _next(self, position: Position, direction: Direction) -> Position | None:
        candidate = position.step(direction)
        return candidate if self.room.bounds.contains(candidate) else None

    def _gps_of(self, tile: Enum) -> int:
        return sum(
            pos.x + 100 * pos.y for pos in self.room.positions() if self.room[pos] is tile
        )

    def _render(self) -> str:
        return "\n".join(
            "".join(
                "@" if Position(x, y) == self.robot else self.room[Position(x, y)].value
                for x in range(self.room.bounds.width)
            )
            for y in range(self.room.bounds.height)
        )


class Warehouse(_BaseWarehouse):
    """A warehouse with single-square boxes."""

    def try_step(self, direction: Direction) -> bool:
        """Move the robot, pushing boxes; return whether it moved."""
        if not self._push(self.robot, direction):
            return False
        self.robot = self.robot.step(direction)
        return True

    def gps(self) -> int:
        """Sum of x + 100 * y over all boxes."""
        return self._gps_of(Tile.BOX)

    def render(self) -> str:
        """Draw the warehouse with the robot as '@'."""
        return self._render()

    def _push(self, start: Position, direction: Direction) -> bool:
        target = self._next(start, direction)
        if target is None:
            return False
        value = self.room[target]
        if value is Tile.EMPTY or (value is Tile.BOX and self._push(target, direction)):
            self.room[target] = self.room[start]
            return True
        return False


class WideWarehouse(_BaseWarehouse):
    """A warehouse twice as wide, with boxes spanning two squares."""

    def try_step(self, direction: Direction) -> bool:
        """Move the robot, pushing boxes; return whether it moved."""
        if direction in (Direction.LEFT, Direction.RIGHT):
            moved = self._push_horizontally(self.robot, direction)
        else:
            moved = self._push_vertically({self.robot}, direction)
        if not moved:
            return False
        self.robot = self.robot.step(direction)
        return True

    def gps(self) -> int:
        """Sum of x + 100 * y over the left halves of all boxes."""
        return self._gps_of(HalfTile.BOX_LEFT)

    def render(self) -> str:
        """Draw the warehouse with the robot as '@'."""
        return self._render()

    def _push_horizontally(self, start: Position, direction: Direction) -> bool:
        target = self._next(start, direction)
        if target is None:
            return False
        value = self.room[target]
        if value is HalfTile.EMPTY or (
            value in (HalfTile.BOX_LEFT, HalfTile.BOX_RIGHT)
            and self._push_horizontally(target, direction)
        ):
            self.room[target] = self.room[start]
            return True
        return False

    def _partner(self, position: Position, direction: Direction) -> Position:
        partner = self._next(position, direction)
        if partner is None:
            raise RuntimeError("Box is missing its other half - invalid state.")
        return partner

    def _push_vertically(self, starts: set[Position], direction: Direction) -> bool:
        """Move a whole row of squares at once, or nothing at all."""
        if not starts:
            return True

        obstacles: set[Position] = set()
        for start in starts:
            target = self._next(start, direction)
            if target is None:
                raise RuntimeError("Stepped out of bounds - invalid state.")
            value = self.room[target]
            if value is HalfTile.WALL:
                return False
            if value is HalfTile.BOX_LEFT:
                obstacles.update((target, self._partner(target, Direction.RIGHT)))
            elif value is HalfTile.BOX_RIGHT:
                obstacles.update((target, self._partner(target, Direction.LEFT)))

        if not self._push_vertically(obstacles, direction):
            return False
        for start in starts:
            target = start.step(direction)
            self.room[target] = self.room[start]
            self.room[start] = HalfTile.EMPTY
        return True


def _widen(line: str) -> str:
    return (
        line.replace(".", "..").replace("O", "[]").replace("#", "##").replace("@", "@.")
    )


def load_input(
    lines: Iterable[str], wide: bool = False
) -> tuple[Warehouse | WideWarehouse, list[Direction]]:
    """Read the warehouse map, then the robot's moves after the first blank line."""
    iterator = iter(lines)
    map_lines = [_widen(line) if wide else line for line in takewhile(bool, iterator)]
    directions = [Direction.from_char(char) for char in "".join(iterator)]

    grid: Grid[str] = Grid.from_lines(map_lines)
    robots = grid.find("@")
    if len(robots) != 1:
        raise ValueError("Could not find unique robot position.")
    (robot,) = robots

    if wide:
        return WideWarehouse(grid.map(HalfTile.from_char), robot), directions
    return Warehouse(grid.map(Tile.from_char), robot), directions


def part1(path: str) -> int:
    warehouse, directions = load_input(lines_from_file(path))
    for direction in directions:
        warehouse.try_step(direction)
    return warehouse.gps()


def part2(path: str, debug: bool = False) -> int:
    warehouse, directions = load_input(lines_from_file(path), wide=True)
    if debug:
        print("Initial:")
        print(warehouse.render())
    for direction in directions:
        warehouse.try_step(direction)
        if debug:
            print(f"Step: {direction.name}")
            print(warehouse.render())
    return warehouse.gps()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 15.")
    parser.add_argument("path", nargs="?", default="input/input15.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path, False))