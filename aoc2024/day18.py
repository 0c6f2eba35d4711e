"""RAM Run: escaping a memory space while bytes fall into it."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable
from itertools import count

from .file_io import lines_from_file
from .geometry import Bounds, Position
from .grid import Grid

Corruption = tuple[int, int]


class MemorySpace:
    """A square of memory cells; corrupted cells cannot be entered."""

    def __init__(self, width: int, height: int) -> None:
        self.corrupted: Grid[bool] = Grid.filled(Bounds(width, height), False)
        self.start = Position(0, 0)
        self.end = Position(width - 1, height - 1)

    def corrupt(self, position: Position) -> None:
        self.corrupted[position] = True

    def bulk_corrupt(self, corruptions: Iterable[Corruption]) -> None:
        for x, y in corruptions:
            self.corrupt(Position(x, y))

    def _heuristic(self, position: Position) -> int:
        return abs(position.x - self.end.x) + abs(position.y - self.end.y)

    def shortest_path(self) -> int | None:
        """Number of steps from the top-left to the bottom-right corner, if reachable."""
        tie = count()
        heap = [(self._heuristic(self.start), next(tie), 0, self.start)]
        fastest: dict[Position, int] = {}

        while heap:
            _, _, elapsed, position = heapq.heappop(heap)
            if position == self.end:
                return elapsed

            known = fastest.get(position)
            if known is not None and known <= elapsed:
                continue
            fastest[position] = elapsed

            for neighbour in position.valid_neighbours(self.corrupted.bounds):
                if not self.corrupted[neighbour]:
                    heapq.heappush(
                        heap,
                        (
                            elapsed + 1 + self._heuristic(neighbour),
                            next(tie),
                            elapsed + 1,
                            neighbour,
                        ),
                    )
        return None


def find_blocking_byte(size: tuple[int, int], corruptions: list[Corruption]) -> int:
    """Index of the first falling byte after which the exit cannot be reached."""
    if not corruptions:
        raise ValueError("No corruptions given.")
    width, height = size
    left, right = 0, len(corruptions) - 1
    while left < right:
        mid = (left + right) // 2
        memory = MemorySpace(width, height)
        memory.bulk_corrupt(corruptions[: mid + 1])
        if memory.shortest_path() is not None:
            left = mid + 1
        else:
            right = mid
    return right


def _parse_corruption(line: str) -> Corruption:
    parts = line.split(",")
    if len(parts) != 2:
        raise ValueError(
            f"Each line should contain a pair of comma-separated numbers: {line!r}"
        )
    return int(parts[0]), int(parts[1])


def load_corruptions(path: str) -> list[Corruption]:
    return [_parse_corruption(line) for line in lines_from_file(path)]


def part1(path: str, size: tuple[int, int], fallen_bytes: int) -> int:
    corruptions = load_corruptions(path)
    if fallen_bytes > len(corruptions):
        raise ValueError("Not enough bytes in the input.")
    memory = MemorySpace(*size)
    memory.bulk_corrupt(corruptions[:fallen_bytes])
    steps = memory.shortest_path()
    if steps is None:
        raise ValueError("No shortest path found!")
    return steps


def part2(path: str, size: tuple[int, int]) -> Corruption:
    corruptions = load_corruptions(path)
    return corruptions[find_blocking_byte(size, corruptions)]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 18.")
    parser.add_argument("path", nargs="?", default="input/input18.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path, (71, 71), 1024))
    print("Answer to part 2:")
    print(part2(args.path, (71, 71)))