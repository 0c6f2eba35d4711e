"""Guard Gallivant: following a patrolling guard through a lab."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .file_io import lines_from_file
from .geometry import Bounds, Direction, Position

_GUARD_CHARS = "^>v<"


@dataclass(frozen=True)
class Maze:
    """The lab map with the guard's starting position and heading."""

    guard: Position
    direction: Direction
    obstacles: frozenset[Position]
    bounds: Bounds

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Maze:
        guard = Position(0, 0)
        direction = Direction.UP
        obstacles: set[Position] = set()
        bounds = Bounds(0, 0)
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char == "#":
                    obstacles.add(Position(x, y))
                elif char in _GUARD_CHARS:
                    guard = Position(x, y)
                    direction = Direction.from_char(char)
                bounds = Bounds(x + 1, y + 1)
        return cls(guard, direction, frozenset(obstacles), bounds)

    def _walk(
        self, obstacles: frozenset[Position] | set[Position]
    ) -> Iterator[tuple[Position, Direction]]:
        """Yield the guard's state after each move until she leaves the map."""
        position, direction = self.guard, self.direction
        while True:
            next_position = position.step(direction)
            if next_position in obstacles:
                direction = direction.turned_right()
            elif self.bounds.contains(next_position):
                position = next_position
            else:
                return
            yield position, direction

    def visited_positions(self) -> set[Position]:
        """All positions the guard occupies before leaving the map."""
        visited = {self.guard}
        visited.update(position for position, _ in self._walk(self.obstacles))
        return visited

    def creates_loop(self, obstacle: Position) -> bool:
        """Whether an extra obstacle traps the guard in a loop."""
        seen = {(self.guard, self.direction)}
        for state in self._walk(self.obstacles | {obstacle}):
            if state in seen:
                return True
            seen.add(state)
        return False


def part1(path: str) -> int:
    return len(Maze.from_lines(lines_from_file(path)).visited_positions())


def part2(path: str) -> int:
    maze = Maze.from_lines(lines_from_file(path))
    return sum(1 for obstacle in maze.visited_positions() if maze.creates_loop(obstacle))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 6.")
    parser.add_argument("path", nargs="?", default="input/input06.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))