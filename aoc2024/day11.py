"""Plutonian Pebbles: stones that change every blink."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Mapping

from .file_io import lines_from_file


def _blink_stone(stone: int) -> list[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        factor = 10 ** (len(digits) // 2)
        return [stone // factor, stone % factor]
    return [stone * 2024]


def blink_list(stones: Iterable[int]) -> list[int]:
    """The stones after one blink, in order."""
    return [new for stone in stones for new in _blink_stone(stone)]


def blink_map(stones: Mapping[int, int]) -> Counter[int]:
    """One blink applied to stone counts, ignoring order."""
    result: Counter[int] = Counter()
    for stone, count in stones.items():
        for new in _blink_stone(stone):
            result[new] += count
    return result


def _stones_from_file(path: str) -> list[int]:
    return [int(word) for line in lines_from_file(path) for word in line.split()]


def part1(path: str) -> int:
    stones = _stones_from_file(path)
    for _ in range(25):
        stones = blink_list(stones)
    return len(stones)


def part2(path: str) -> int:
    stones: Counter[int] = Counter(_stones_from_file(path))
    for _ in range(75):
        stones = blink_map(stones)
    return sum(stones.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 11.")
    parser.add_argument("path", nargs="?", default="input/input11.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))