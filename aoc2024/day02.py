"""Red-Nosed Reports: safety of level reports."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum

from .file_io import rows_from_file

_SAFE_STEPS = (1, 2, 3)


class ReportType(Enum):
    UNSAFE = "unsafe"
    TRIVIAL = "trivial"
    INCREASING = "increasing"
    DECREASING = "decreasing"

    def is_safe(self) -> bool:
        return self is not ReportType.UNSAFE

    def combined_with(self, other: ReportType) -> ReportType:
        """The type a report has when joined with a part of the other type."""
        if ReportType.UNSAFE in (self, other) or {self, other} == {
            ReportType.INCREASING,
            ReportType.DECREASING,
        }:
            return ReportType.UNSAFE
        if self is ReportType.TRIVIAL:
            return other
        return self


def report_type(report: Sequence[int]) -> ReportType:
    if len(report) < 2:
        return ReportType.TRIVIAL
    differences = [b - a for a, b in zip(report, report[1:])]
    if report[1] > report[0] and all(d in _SAFE_STEPS for d in differences):
        return ReportType.INCREASING
    if report[1] < report[0] and all(-d in _SAFE_STEPS for d in differences):
        return ReportType.DECREASING
    return ReportType.UNSAFE


def is_safe_report(report: Sequence[int]) -> bool:
    return report_type(report).is_safe()


def is_safe_report_with_damper(report: Sequence[int]) -> bool:
    """Whether the report is safe after removing at most one level."""
    if len(report) < 3:
        return True
    if is_safe_report(report[1:]) or is_safe_report(report[:-1]):
        return True

    for idx in range(1, len(report) - 1):
        left_type = report_type(report[:idx])
        if not left_type.is_safe():
            return False
        right_needs_type = report_type([report[idx - 1], report[idx + 1]]).combined_with(
            left_type
        )
        if not right_needs_type.is_safe():
            continue
        if report_type(report[idx + 1 :]).combined_with(right_needs_type).is_safe():
            return True
    return False


def part1(path: str) -> int:
    return sum(1 for report in rows_from_file(path, int) if is_safe_report(report))


def part2(path: str) -> int:
    return sum(
        1 for report in rows_from_file(path, int) if is_safe_report_with_damper(report)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 2.")
    parser.add_argument("path", nargs="?", default="input/input02.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))