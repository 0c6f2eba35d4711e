import pytest

from aoc2024.day08 import City, gcd, part1, part2
from aoc2024.geometry import Bounds, Position
from aoc2024.grid import Grid

EXAMPLE = [
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
]


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "input08.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    return str(path)


@pytest.mark.parametrize(
    "a, b, expected",
    [(20, 5, 5), (5, 20, 5), (0, 8, 8), (3824, 218, 2), (91, 26, 13)],
)
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


def test_part1(example_path):
    assert part1(example_path) == 14


def test_part2(example_path):
    assert part2(example_path) == 34


def test_from_grid():
    city = City.from_grid(Grid.from_lines(EXAMPLE))
    assert city.bounds == Bounds(12, 12)
    assert set(city.antennas) == {"0", "A"}
    assert Position(8, 1) in city.antennas["0"]
    assert len(city.antennas["A"]) == 3


def test_basic_antinodes_small():
    city = City.from_grid(Grid.from_lines(["......", "..a.a.", "......"]))
    assert city.basic_antinodes() == {Position(0, 1)}


def test_harmonic_antinodes_include_antennas():
    city = City.from_grid(Grid.from_lines(EXAMPLE))
    antinodes = city.harmonic_antinodes()
    for positions in city.antennas.values():
        assert positions <= antinodes