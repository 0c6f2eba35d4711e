import pytest

from aoc2024.day14 import (
    Robot,
    Torus,
    advance_pack,
    parse_robots,
    part1,
    part2,
    render,
    safety_factor,
)
from aoc2024.geometry import Vec2D

EXAMPLE = [
    "p=0,4 v=3,-3",
    "p=6,3 v=0,-3",
    "p=10,3 v=-1,2",
    "p=2,0 v=2,-1",
    "p=0,0 v=1,3",
    "p=3,0 v=-2,-2",
    "p=7,6 v=-1,-3",
    "p=3,0 v=-1,-2",
    "p=9,3 v=2,3",
    "p=7,3 v=-1,2",
    "p=2,4 v=2,-3",
    "p=9,5 v=-3,-3",
]


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "input14.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    return str(path)


def test_parse_robots():
    robots = parse_robots(EXAMPLE[:1])
    assert robots == [Robot(Vec2D(0, 4), Vec2D(3, -3))]


def test_parse_robots_rejects_garbage():
    with pytest.raises(ValueError):
        parse_robots(["not a robot"])


def test_move_wraps_around():
    robot = Robot(Vec2D(2, 4), Vec2D(2, -3))
    robot.move_on_torus(5, Torus(11, 7))
    assert robot.pos == Vec2D(1, 3)


def test_advance_pack_period():
    torus = Torus(11, 7)
    robots = parse_robots(EXAMPLE)
    start = [robot.pos for robot in robots]
    advance_pack(robots, 77, torus)
    assert [robot.pos for robot in robots] == start


def test_safety_factor_ignores_middle():
    robots = [Robot(Vec2D(5, 3), Vec2D(0, 0)), Robot(Vec2D(0, 0), Vec2D(0, 0))]
    assert safety_factor(robots, Torus(11, 7)) == 1


def test_render():
    robots = [Robot(Vec2D(0, 0), Vec2D(0, 0)), Robot(Vec2D(0, 0), Vec2D(1, 0))]
    assert render(robots, Torus(2, 2)) == "2.\n.."


def test_part2_prints_frames(example_path, capsys):
    assert part2(example_path, Torus(11, 7)) == "Look for the ||s and =s"
    out = capsys.readouterr().out
    assert out.startswith("6901:\n")
    assert "7100:\n" in out