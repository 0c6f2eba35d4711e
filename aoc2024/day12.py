"""Garden Groups: fencing regions of a garden."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .file_io import lines_from_file
from .geometry import Direction, Position
from .grid import Grid


@dataclass(frozen=True)
class Plot:
    """A contiguous region of one plant type."""

    plant_type: str
    plants: frozenset[Position]

    def area(self) -> int:
        return len(self.plants)

    def perimeter(self) -> int:
        return sum(
            1
            for plant in self.plants
            for neighbour in plant.neighbours()
            if neighbour not in self.plants
        )

    def _boundary(self, direction: Direction) -> set[Position]:
        return {pos for pos in self.plants if pos.step(direction) not in self.plants}

    def sides(self) -> int:
        """Number of straight fence sections around the plot."""
        total = 0
        for direction in Direction:
            boundary = self._boundary(direction)
            visited: set[Position] = set()
            search_dirs = (direction.turned_left(), direction.turned_right())
            for pos in boundary:
                if pos in visited:
                    continue
                visited.add(pos)
                for search_dir in search_dirs:
                    current = pos
                    while current in boundary:
                        visited.add(current)
                        current = current.step(search_dir)
                total += 1
        return total


def find_plots(field: Grid[str]) -> list[Plot]:
    recorded: set[Position] = set()
    plots: list[Plot] = []
    for pos in field.positions():
        if pos in recorded:
            continue
        plot = Plot(field[pos], frozenset(field.contiguous_region(pos)))
        recorded.update(plot.plants)
        plots.append(plot)
    return plots


def _plots(path: str) -> list[Plot]:
    return find_plots(Grid.from_lines(lines_from_file(path)))


def part1(path: str) -> int:
    return sum(plot.area() * plot.perimeter() for plot in _plots(path))


def part2(path: str) -> int:
    return sum(plot.area() * plot.sides() for plot in _plots(path))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 12.")
    parser.add_argument("path", nargs="?", default="input/input12.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))