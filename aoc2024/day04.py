"""Ceres Search: finding XMAS in a word search."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from .file_io import lines_from_file
from .geometry import Position, Vec2D
from .grid import Grid

_DIRECTIONS = [
    Vec2D(-1, -1),
    Vec2D(-1, 0),
    Vec2D(-1, 1),
    Vec2D(0, -1),
    Vec2D(0, 1),
    Vec2D(1, -1),
    Vec2D(1, 0),
    Vec2D(1, 1),
]


def _matches_word(puzzle: Grid[str], positions: Iterable[Position], word: str) -> bool:
    return all(
        puzzle.bounds.contains(pos) and puzzle[pos] == char
        for pos, char in zip(positions, word)
    )


def _straight_line(start: Position, delta: Vec2D, length: int) -> list[Position]:
    return [start + delta * step for step in range(length)]


def _is_x_mas(puzzle: Grid[str], pos: Position) -> bool:
    x, y = pos
    diag1 = [Position(x - 1, y - 1), Position(x + 1, y + 1)]
    diag2 = [Position(x - 1, y + 1), Position(x + 1, y - 1)]
    return (
        puzzle[pos] == "A"
        and (_matches_word(puzzle, diag1, "MS") or _matches_word(puzzle, diag1, "SM"))
        and (_matches_word(puzzle, diag2, "MS") or _matches_word(puzzle, diag2, "SM"))
    )


def count_xmas(puzzle: Grid[str]) -> int:
    """Count XMAS in all eight directions."""
    return sum(
        1
        for pos in puzzle.positions()
        for delta in _DIRECTIONS
        if _matches_word(puzzle, _straight_line(pos, delta, 4), "XMAS")
    )


def count_x_mas(puzzle: Grid[str]) -> int:
    """Count two MAS words crossing in an X."""
    return sum(1 for pos in puzzle.positions() if _is_x_mas(puzzle, pos))


def part1(path: str) -> int:
    return count_xmas(Grid.from_lines(lines_from_file(path)))


def part2(path: str) -> int:
    return count_x_mas(Grid.from_lines(lines_from_file(path)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 4.")
    parser.add_argument("path", nargs="?", default="input/input04.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))