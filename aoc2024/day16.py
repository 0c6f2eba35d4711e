"""Reindeer Maze: the cheapest path and the seats along all cheapest paths."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count

from .file_io import lines_from_file
from .geometry import Direction, Position
from .grid import Grid

_TURN_COST = 1000
_STEP_COST = 1

# A trail is a linked list of positions: (position, previous trail).
_Trail = tuple[Position, "_Trail | None"]


def _is_open(char: str) -> bool:
    if char == "#":
        return False
    if char in ".SE":
        return True
    raise ValueError(f"Invalid character {char!r} for maze field.")


def _unique(grid: Grid[str], char: str) -> Position:
    found = grid.find(char)
    if len(found) != 1:
        raise ValueError(f"There should be exactly one {char} in the input.")
    (position,) = found
    return position


def _trail_positions(trail: _Trail | None) -> Iterator[Position]:
    while trail is not None:
        position, trail = trail
        yield position


@dataclass(frozen=True)
class ReindeerMaze:
    """A maze where moving costs 1 and turning costs 1000."""

    open_tiles: Grid[bool]
    start: Position
    end: Position

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ReindeerMaze:
        grid: Grid[str] = Grid.from_lines(lines)
        start = _unique(grid, "S")
        end = _unique(grid, "E")
        return cls(grid.map(_is_open), start, end)

    def score_and_best_seats(self) -> tuple[int, int]:
        """Lowest score from start to end, and the tiles on any lowest-score path."""
        tie = count()
        start_trail: _Trail = (self.start, None)
        heap = [(0, next(tie), self.start, Direction.RIGHT, start_trail)]
        min_scores: dict[tuple[Position, Direction], int] = {}
        min_total: int | None = None
        best_seats: set[Position] = set()

        while heap:
            score, _, position, direction, trail = heapq.heappop(heap)
            if position == self.end:
                if min_total is not None and min_total < score:
                    break
                if min_total is None:
                    min_total = score
                best_seats.update(_trail_positions(trail))

            known = min_scores.get((position, direction))
            if known is not None and known < score:
                continue
            min_scores[(position, direction)] = score

            for turned in (direction.turned_right(), direction.turned_left()):
                heapq.heappush(
                    heap, (score + _TURN_COST, next(tie), position, turned, trail)
                )
            forward = position.step(direction)
            if self.open_tiles.bounds.contains(forward) and self.open_tiles[forward]:
                heapq.heappush(
                    heap,
                    (score + _STEP_COST, next(tie), forward, direction, (forward, trail)),
                )

        if min_total is None:
            raise ValueError("No path found!")
        return min_total, len(best_seats)


def part1(path: str) -> int:
    return ReindeerMaze.from_lines(lines_from_file(path)).score_and_best_seats()[0]


def part2(path: str) -> int:
    return ReindeerMaze.from_lines(lines_from_file(path)).score_and_best_seats()[1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 16.")
    parser.add_argument("path", nargs="?", default="input/input16.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))