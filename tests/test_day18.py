import pytest

from aoc2024.day18 import (
    MemorySpace,
    find_blocking_byte,
    load_corruptions,
    part1,
    part2,
)
from aoc2024.geometry import Position

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "input18.txt"
    path.write_text(EXAMPLE)
    return str(path)


def test_part1(example_path):
    assert part1(example_path, (7, 7), 12) == 22


def test_part2(example_path):
    assert part2(example_path, (7, 7)) == (6, 1)


def test_load_corruptions(example_path):
    corruptions = load_corruptions(example_path)
    assert len(corruptions) == 25
    assert corruptions[0] == (5, 4)
    assert corruptions[-1] == (2, 0)


def test_find_blocking_byte(example_path):
    corruptions = load_corruptions(example_path)
    assert find_blocking_byte((7, 7), corruptions) == 20


def test_empty_space_shortest_path():
    assert MemorySpace(7, 7).shortest_path() == 12


def test_walled_off_space_has_no_path():
    memory = MemorySpace(7, 7)
    for y in range(7):
        memory.corrupt(Position(3, y))
    assert memory.shortest_path() is None


def test_bulk_corrupt_marks_cells():
    memory = MemorySpace(3, 3)
    memory.bulk_corrupt([(1, 0), (1, 1)])
    assert memory.corrupted[Position(1, 0)] is True
    assert memory.corrupted[Position(0, 0)] is False
    assert memory.shortest_path() == 4


def test_find_blocking_byte_without_corruptions():
    with pytest.raises(ValueError):
        find_blocking_byte((7, 7), [])


def test_malformed_line(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1,2,3\n")
    with pytest.raises(ValueError):
        load_corruptions(str(path))