"""Linen Layout: arranging towels into striped designs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .file_io import lines_from_file


class Stripe(Enum):
    WHITE = "w"
    BLUE = "u"
    BLACK = "b"
    RED = "r"
    GREEN = "g"


Pattern = tuple[Stripe, ...]


def pattern_from_word(word: str) -> Pattern:
    """Parse a word of stripe letters, ignoring surrounding whitespace."""
    try:
        return tuple(Stripe(char) for char in word.strip())
    except ValueError:
        raise ValueError(f"Invalid character for parsing stripe in {word!r}.") from None


@dataclass
class _Node:
    is_end: bool
    children: dict[Stripe, _Node] = field(default_factory=dict)


class PatternTrie:
    """A prefix tree of towel patterns; the empty pattern is always contained."""

    def __init__(self, patterns: Iterable[Sequence[Stripe]] = ()) -> None:
        self._root = _Node(True)
        for pattern in patterns:
            self.insert(pattern)

    def insert(self, pattern: Sequence[Stripe]) -> None:
        node = self._root
        for stripe in pattern:
            node = node.children.setdefault(stripe, _Node(False))
        node.is_end = True

    def contains(self, pattern: Sequence[Stripe]) -> bool:
        node = self._root
        for stripe in pattern:
            child = node.children.get(stripe)
            if child is None:
                return False
            node = child
        return node.is_end

    def can_make(self, pattern: Sequence[Stripe]) -> bool:
        """Whether the pattern is a concatenation of stored patterns."""
        memo: dict[tuple[Stripe, ...], bool] = {}

        def makeable(part: tuple[Stripe, ...]) -> bool:
            if part in memo:
                return memo[part]
            if self.contains(part):
                result = True
            elif len(part) == 1:
                result = False
            else:
                result = any(
                    self.contains(part[i:]) and makeable(part[:i])
                    for i in range(1, len(part))
                )
            memo[part] = result
            return result

        return makeable(tuple(pattern))

    def ways_to_make(self, pattern: Sequence[Stripe]) -> int:
        """Number of ways to split the pattern into stored patterns."""
        cache: dict[tuple[Stripe, ...], int] = {}

        def ways(part: tuple[Stripe, ...]) -> int:
            if part in cache:
                return cache[part]
            if len(part) <= 1:
                return int(self.contains(part))
            total = sum(
                ways(part[i:]) for i in range(1, len(part) + 1) if self.contains(part[:i])
            )
            cache[part] = total
            return total

        return ways(tuple(pattern))


def load_input(path: str) -> tuple[PatternTrie, list[Pattern]]:
    """Read the towel patterns from the first line and the designs after it."""
    lines = lines_from_file(path)
    first = next(lines, None)
    if first is None:
        raise ValueError("No input found.")
    trie = PatternTrie(pattern_from_word(word) for word in first.split(","))
    designs = [pattern_from_word(line) for line in lines if line]
    return trie, designs


def part1(path: str) -> int:
    trie, designs = load_input(path)
    return sum(1 for design in designs if trie.can_make(design))


def part2(path: str) -> int:
    trie, designs = load_input(path)
    return sum(trie.ways_to_make(design) for design in designs)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 19.")
    parser.add_argument("path", nargs="?", default="input/input19.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))