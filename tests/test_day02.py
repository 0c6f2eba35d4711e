import pytest

from aoc2024.day02 import (
    ReportType,
    is_safe_report,
    is_safe_report_with_damper,
    part1,
    part2,
    report_type,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "input02.txt.test1"
    path.write_text(EXAMPLE)
    return str(path)


def test_safe_reports():
    assert is_safe_report([1, 3, 4, 5, 7])
    assert is_safe_report([7, 5, 4, 3, 1])
    assert is_safe_report([7, 4, 3, 2, 1])
    assert is_safe_report([1, 3, 4, 3, 5]) is False
    assert is_safe_report([8, 4, 3, 2, 1]) is False


def test_part1(example):
    assert part1(example) == 2


def test_safe_reports_with_damper():
    assert is_safe_report_with_damper([1, 3, 4, 5, 7])
    assert is_safe_report_with_damper([8, 5, 4, 2, 1])
    assert is_safe_report_with_damper([1, 3, 4, 3, 5])
    assert is_safe_report_with_damper([7, 8, 4, 3, 1])
    assert is_safe_report_with_damper([3, 4, 3, 2, 1])
    assert is_safe_report_with_damper([4, 3, 2, 1, 3])
    assert is_safe_report_with_damper([4, 3, 4, 3, 4]) is False


def test_part2(example):
    assert part2(example) == 4


def test_report_types():
    assert report_type([5]) == ReportType.TRIVIAL
    assert report_type([1, 2]) == ReportType.INCREASING
    assert report_type([2, 1]) == ReportType.DECREASING
    assert report_type([2, 2]) == ReportType.UNSAFE


def test_combined_with():
    assert ReportType.TRIVIAL.combined_with(ReportType.INCREASING) == ReportType.INCREASING
    assert ReportType.DECREASING.combined_with(ReportType.TRIVIAL) == ReportType.DECREASING
    assert ReportType.INCREASING.combined_with(ReportType.DECREASING) == ReportType.UNSAFE
    assert ReportType.TRIVIAL.combined_with(ReportType.UNSAFE) == ReportType.UNSAFE
    assert not ReportType.UNSAFE.is_safe()