"""Hoof It: hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

from .file_io import lines_from_file
from .geometry import Position
from .grid import Grid


@dataclass(frozen=True)
class Topography:
    """A height map with heights 0 to 9."""

    grid: Grid[int]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Topography:
        return cls(Grid.from_lines(lines, int))

    def _next_steps(self, start: Position, target: int) -> list[Position]:
        value = self.grid[start]
        wanted = value + 1 if target > value else value - 1
        return [
            neighbour
            for neighbour in start.valid_neighbours(self.grid.bounds)
            if self.grid[neighbour] == wanted
        ]

    def _reachable_targets(self, start: Position, target: int) -> set[Position]:
        if self.grid[start] == target:
            return {start}
        return set().union(
            *(self._reachable_targets(step, target) for step in self._next_steps(start, target))
        )

    def _partial_rating(self, start: Position, target: int) -> int:
        if self.grid[start] == target:
            return 1
        return sum(
            self._partial_rating(step, target) for step in self._next_steps(start, target)
        )

    def trail_score(self) -> int:
        """Sum over trailheads of the number of peaks each can reach."""
        return sum(len(self._reachable_targets(head, 9)) for head in self.grid.find(0))

    def trail_rating(self) -> int:
        """Sum over trailheads of the number of distinct trails to a peak."""
        return sum(self._partial_rating(head, 9) for head in self.grid.find(0))


def part1(path: str) -> int:
    return Topography.from_lines(lines_from_file(path)).trail_score()


def part2(path: str) -> int:
    return Topography.from_lines(lines_from_file(path)).trail_rating()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 10.")
    parser.add_argument("path", nargs="?", default="input/input10.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))