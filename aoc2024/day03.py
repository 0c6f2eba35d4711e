"""Mull It Over: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re

from .file_io import lines_from_file

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_DISABLED = re.compile(r"don't\(\).*?(?:do\(\)|\Z)")


def compute_sum(text: str) -> int:
    """Sum the products of all well-formed mul instructions."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def enabled_instructions(text: str) -> str:
    """Remove everything from each don't() up to the next do() or the end."""
    return _DISABLED.sub("", text)


def part1(path: str) -> int:
    return sum(compute_sum(line) for line in lines_from_file(path))


def part2(path: str) -> int:
    return compute_sum(enabled_instructions(" ".join(lines_from_file(path))))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 3.")
    parser.add_argument("path", nargs="?", default="input/input03.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))