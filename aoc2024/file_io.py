"""Reading puzzle input files line by line."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

T = TypeVar("T")


def lines_from_file(path: str) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            yield line.removesuffix("\n").removesuffix("\r")


def two_columns_from_file(
    path: str, parse: Callable[[str], T] = int
) -> tuple[list[T], list[T]]:
    """Read a file of two whitespace-separated columns into two lists."""
    left: list[T] = []
    right: list[T] = []
    for line in lines_from_file(path):
        words = line.split()
        if len(words) != 2:
            raise ValueError(f"Each line must contain exactly two elements: {line!r}")
        first, second = (parse(word) for word in words)
        left.append(first)
        right.append(second)
    return left, right


def rows_from_file(path: str, parse: Callable[[str], T] = int) -> list[list[T]]:
    """Read a file into rows of whitespace-separated values."""
    return [[parse(word) for word in line.split()] for line in lines_from_file(path)]