import pytest

from aoc2024.geometry import Bounds, Direction, Position, Vec2D


def test_direction_order():
    assert [Direction.from_char(char) for char in "^>v<"] == list(Direction)
    assert list(Direction) == [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]


@pytest.mark.parametrize("char", "^>v<")
def test_four_right_turns_return(char):
    direction = Direction.from_char(char)
    turned = direction
    for _ in range(4):
        turned = turned.turned_right()
    assert turned == direction


@pytest.mark.parametrize("char", "^>v<")
def test_left_undoes_right(char):
    direction = Direction.from_char(char)
    assert Direction.turned_left(Direction.turned_right(direction)) == direction
    assert Direction.turned_around(direction) == direction.turned_right().turned_right()
    assert Direction.turned_around(direction) != direction


def test_right_turn_of_up():
    assert Direction.UP.turned_right() == Direction.RIGHT


@pytest.mark.parametrize("char", "^>v<")
def test_char_round_trip(char):
    assert Direction.from_char(char).to_char() == char


def test_invalid_direction_char():
    with pytest.raises(ValueError):
        Direction.from_char("x")


@pytest.mark.parametrize("direction", list(Direction))
def test_step_and_back(direction):
    pos = Position(3, 7)
    assert pos.step(direction).step(direction.turned_around()) == pos


def test_neighbours_are_steps():
    pos = Position(2, 2)
    assert set(pos.neighbours()) == {pos.step(d) for d in Direction}
    assert all((n - pos).norm_sq() == 1 for n in pos.neighbours())


def test_mirroring():
    pos1 = Position(5, 4)
    pos2 = Position(7, 4)
    pos3 = Position(10, 10)
    assert pos1.mirrored_across(pos2) == Position(9, 4)
    assert pos2.mirrored_across(pos1) == Position(3, 4)
    assert pos1.mirrored_across(pos3) == Position(15, 16)
    assert pos3.mirrored_across(pos1) == Position(0, -2)


def test_mirror_twice_is_identity():
    pos, centre = Position(-3, 8), Position(4, 1)
    assert pos.mirrored_across(centre).mirrored_across(centre) == pos


def test_position_vector_round_trip():
    p, q = Position(1, 9), Position(-4, 2)
    assert p + (q - p) == q


def test_in_bounds():
    bounds = Bounds(3, 2)
    assert Position(2, 1).in_bounds(bounds) == Position(2, 1)
    assert Position(-1, 0).in_bounds(bounds) is None
    assert Position(3, 0).in_bounds(bounds) is None
    assert Position(0, 2).in_bounds(bounds) is None


def test_valid_neighbours_of_corner():
    bounds = Bounds(3, 3)
    corner = Position(0, 0)
    valid = corner.valid_neighbours(bounds)
    assert valid <= set(corner.neighbours())
    assert all(bounds.contains(p) for p in valid)
    assert len(valid) == 2


def test_vector_arithmetic():
    v = Vec2D(3, -4)
    assert v * 3 == v + v + v
    assert 2 * v == v * 2
    assert v - v == Vec2D(0, 0)
    assert -v + v == Vec2D(0, 0)
    assert tuple(v) == (3, -4)


def test_dot_and_norm():
    v = Vec2D(5, 12)
    assert v.dot(Vec2D(-v.y, v.x)) == 0
    assert v.norm_sq() == v.dot(v)


def test_div_truncates_towards_zero():
    assert Vec2D(-7, 7).div(2) == Vec2D(-3, 3)
    assert (Vec2D(6, -9) * 4).div(4) == Vec2D(6, -9)


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vec2D(1, 1).div(0)