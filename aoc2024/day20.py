"""Race Condition: cheating through walls on a single-lane racetrack."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .file_io import lines_from_file
from .geometry import Position
from .grid import Grid

Cheat = tuple[Position, Position]

_OFFSETS_2 = ((2, 0), (1, 1), (0, 2), (-1, 1), (-2, 0), (-1, -1), (0, -2), (1, -1))
_OFFSETS_20 = tuple(
    (dx, dy)
    for dx in range(-20, 21)
    for dy in range(-(20 - abs(dx)), 20 - abs(dx) + 1)
)


def _is_open(char: str) -> bool:
    if char == "#":
        return False
    if char in ".SE":
        return True
    raise ValueError(f"Invalid character {char!r} for racetrack field.")


def _unique(grid: Grid[str], char: str) -> Position:
    found = grid.find(char)
    if len(found) != 1:
        raise ValueError(f"There should be exactly one {char} in the input.")
    (position,) = found
    return position


@dataclass(frozen=True)
class RaceTrack:
    """A track with exactly one path from start to end."""

    open_tiles: Grid[bool]
    start: Position
    end: Position

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> RaceTrack:
        grid: Grid[str] = Grid.from_lines(lines)
        start = _unique(grid, "S")
        end = _unique(grid, "E")
        return cls(grid.map(_is_open), start, end)

    def single_path(self) -> list[Position]:
        """The positions of the track from start to end, in order."""
        previous: Position | None = None
        position = self.start
        path = [position]
        while position != self.end:
            steps = [
                neighbour
                for neighbour in position.valid_neighbours(self.open_tiles.bounds)
                if self.open_tiles[neighbour] and neighbour != previous
            ]
            if len(steps) != 1:
                raise ValueError(
                    "Racetrack should have a unique step forward at each point "
                    "except at the end."
                )
            previous, position = position, steps[0]
            path.append(position)
        return path

    def _cheats(
        self, offsets: Sequence[tuple[int, int]]
    ) -> dict[int, set[Cheat]]:
        timestamps = {pos: time for time, pos in enumerate(self.single_path())}
        cheats: defaultdict[int, set[Cheat]] = defaultdict(set)
        for start, start_time in timestamps.items():
            for dx, dy in offsets:
                end = Position(start.x + dx, start.y + dy)
                end_time = timestamps.get(end)
                if end_time is None:
                    continue
                arrival = start_time + abs(dx) + abs(dy)
                if end_time > arrival:
                    cheats[end_time - arrival].add((start, end))
        return dict(cheats)

    def cheats(self) -> dict[int, set[Cheat]]:
        """Two-step cheats grouped by the time they save."""
        return self._cheats(_OFFSETS_2)

    def big_cheats(self) -> dict[int, set[Cheat]]:
        """Cheats of up to twenty steps grouped by the time they save."""
        return self._cheats(_OFFSETS_20)


def _count_saving(cheats: dict[int, set[Cheat]], min_time_save: int) -> int:
    return sum(
        len(cheat_set)
        for time_save, cheat_set in cheats.items()
        if time_save >= min_time_save
    )


def part1(path: str, min_time_save: int) -> int:
    track = RaceTrack.from_lines(lines_from_file(path))
    return _count_saving(track.cheats(), min_time_save)


def part2(path: str, min_time_save: int) -> int:
    track = RaceTrack.from_lines(lines_from_file(path))
    return _count_saving(track.big_cheats(), min_time_save)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 20.")
    parser.add_argument("path", nargs="?", default="input/input20.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path, 100))
    print("Answer to part 2:")
    print(part2(args.path, 100))