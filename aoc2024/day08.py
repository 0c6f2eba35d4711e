"""Resonant Collinearity: antinodes of antenna pairs."""

from __future__ import annotations

import argparse
from collections import defaultdict
from dataclasses import dataclass
from itertools import product

from .file_io import lines_from_file
from .geometry import Bounds, Position
from .grid import Grid


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class City:
    """The map size and the antenna positions grouped by frequency."""

    bounds: Bounds
    antennas: dict[str, frozenset[Position]]

    @classmethod
    def from_grid(cls, grid: Grid[str]) -> City:
        antennas: defaultdict[str, set[Position]] = defaultdict(set)
        for pos in grid.positions():
            frequency = grid[pos]
            if frequency != ".":
                antennas[frequency].add(pos)
        return cls(
            grid.bounds,
            {frequency: frozenset(positions) for frequency, positions in antennas.items()},
        )

    def _pairs(self):
        for positions in self.antennas.values():
            for first, second in product(positions, repeat=2):
                if first != second:
                    yield first, second

    def basic_antinodes(self) -> set[Position]:
        """Points mirrored across each antenna of a same-frequency pair."""
        return {
            antinode
            for first, second in self._pairs()
            if self.bounds.contains(antinode := first.mirrored_across(second))
        }

    def harmonic_antinodes(self) -> set[Position]:
        """All grid points on the lines through same-frequency antenna pairs."""
        antinodes: set[Position] = set()
        for first, second in self._pairs():
            distance = second - first
            delta = distance.div(gcd(abs(distance.x), abs(distance.y)))
            antinode = first
            while self.bounds.contains(antinode):
                antinodes.add(antinode)
                antinode = antinode + delta
        return antinodes


def _scan_city(path: str) -> City:
    return City.from_grid(Grid.from_lines(lines_from_file(path)))


def part1(path: str) -> int:
    return len(_scan_city(path).basic_antinodes())


def part2(path: str) -> int:
    return len(_scan_city(path).harmonic_antinodes())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 8.")
    parser.add_argument("path", nargs="?", default="input/input08.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))