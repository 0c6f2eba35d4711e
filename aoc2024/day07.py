"""Bridge Repair: which calibration equations can be made true."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .file_io import lines_from_file


@dataclass(frozen=True)
class Equation:
    target: int
    numbers: tuple[int, ...]


def equation_possible(
    target: int, numbers: Sequence[int], concatenation_allowed: bool
) -> bool:
    """Whether +, * (and optionally ||) between the numbers can reach target.

    Operators are evaluated left to right, so the search peels numbers off
    the end and undoes the operation on the target.
    """
    if len(numbers) == 1:
        return target == numbers[0]

    *rest, number = numbers
    if target < number:
        return False
    if number != 0 and target % number == 0:
        if equation_possible(target // number, rest, concatenation_allowed):
            return True
    if equation_possible(target - number, rest, concatenation_allowed):
        return True
    if concatenation_allowed:
        divisor = 10 if number == 0 else 10 ** len(str(number))
        remainder = target - number
        if remainder % divisor == 0 and equation_possible(
            remainder // divisor, rest, concatenation_allowed
        ):
            return True
    return False


def parse_equations(lines: Iterable[str]) -> list[Equation]:
    """Parse ``target: n1 n2 ...`` lines, skipping lines without a colon."""
    equations = []
    for line in lines:
        target, separator, numbers = line.partition(": ")
        if not separator:
            continue
        equations.append(
            Equation(int(target.strip()), tuple(int(word) for word in numbers.split()))
        )
    return equations


def _calibration_result(path: str, concatenation_allowed: bool) -> int:
    return sum(
        equation.target
        for equation in parse_equations(lines_from_file(path))
        if equation_possible(equation.target, equation.numbers, concatenation_allowed)
    )


def part1(path: str) -> int:
    return _calibration_result(path, False)


def part2(path: str) -> int:
    return _calibration_result(path, True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 7.")
    parser.add_argument("path", nargs="?", default="input/input07.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))