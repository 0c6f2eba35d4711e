"""Code Chronicle: which keys fit which locks."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import groupby

from .file_io import lines_from_file

PINS = 5
LOCK_HEIGHT = 5

PinSet = tuple[int, ...]
Pin = tuple[int, int]


def _pins(pinset: PinSet) -> list[Pin]:
    return list(enumerate(pinset))


def _fitting_opposites(pin: Pin) -> list[Pin]:
    index, height = pin
    return [(index, complementary) for complementary in range(LOCK_HEIGHT - height + 1)]


def _is_lock(block: Sequence[str]) -> bool:
    first = block[0]
    if first == "#####":
        return True
    if first == ".....":
        return False
    raise ValueError("Each block should start with an empty or a full line.")


def _counts(block: Sequence[str]) -> PinSet:
    counts = [0] * PINS
    for line in block[1:-1]:
        for column, char in enumerate(line):
            if char == "#":
                if column >= PINS:
                    raise ValueError(f"Too many pins in line {line!r}.")
                counts[column] += 1
    return tuple(counts)


class LockSmith:
    """Locks and keys, with locks indexed by the key pins they accept."""

    def __init__(self, locks: Iterable[PinSet], keys: Iterable[PinSet]) -> None:
        self.locks = [tuple(lock) for lock in locks]
        self.keys = [tuple(key) for key in keys]
        self._locks_that_fit_pin: defaultdict[Pin, set[PinSet]] = defaultdict(set)
        for lock in self.locks:
            for pin in _pins(lock):
                for opposite in _fitting_opposites(pin):
                    self._locks_that_fit_pin[opposite].add(lock)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> LockSmith:
        locks: list[PinSet] = []
        keys: list[PinSet] = []
        for is_empty, chunk in groupby(lines, key=lambda line: not line):
            if is_empty:
                continue
            block = list(chunk)
            (locks if _is_lock(block) else keys).append(_counts(block))
        return cls(locks, keys)

    def matching_locks(self, key: PinSet) -> int:
        """Number of distinct locks the key fits without overlapping."""
        lock_sets = sorted(
            (self._locks_that_fit_pin.get(pin, set()) for pin in _pins(tuple(key))),
            key=len,
        )
        if not lock_sets:
            return 0
        fitting = set(lock_sets[0])
        for lock_set in lock_sets[1:]:
            fitting &= lock_set
        return len(fitting)

    def fitting_combinations(self) -> int:
        return sum(self.matching_locks(key) for key in self.keys)


def part1(path: str) -> int:
    return LockSmith.from_lines(lines_from_file(path)).fitting_combinations()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 25.")
    parser.add_argument("path", nargs="?", default="input/input25.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print("Deliver the chronicle!")