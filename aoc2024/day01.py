"""Historian Hysteria: comparing two lists of location ids."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable

from .file_io import two_columns_from_file


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum the distances between the sorted lists, pair by pair."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum each number times its occurrences in both lists."""
    left_counts = Counter(left)
    right_counts = Counter(right)
    return sum(
        number * count * right_counts[number] for number, count in left_counts.items()
    )


def part1(path: str) -> int:
    return total_distance(*two_columns_from_file(path, int))


def part2(path: str) -> int:
    return similarity_score(*two_columns_from_file(path, int))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 1.")
    parser.add_argument("path", nargs="?", default="input/input01.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))