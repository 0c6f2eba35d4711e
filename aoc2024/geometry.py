"""Integer vectors, grid positions, bounds and compass directions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class Vec2D:
    """A two-dimensional integer vector."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __mul__(self, factor: int) -> Vec2D:
        if not isinstance(factor, int):
            return NotImplemented
        return Vec2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def div(self, divisor: int) -> Vec2D:
        """Divide both components, truncating towards zero."""
        return Vec2D(_truncating_div(self.x, divisor), _truncating_div(self.y, divisor))

    def dot(self, other: Vec2D) -> int:
        return self.x * other.x + self.y * other.y

    def norm_sq(self) -> int:
        return self.dot(self)


@dataclass(frozen=True)
class Bounds:
    """The size of a rectangular grid."""

    width: int
    height: int

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height


class Direction(Enum):
    """A compass direction on a grid whose y axis points down."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turned_right(self) -> Direction:
        return _RIGHT_TURNS[self]

    def turned_left(self) -> Direction:
        return _LEFT_TURNS[self]

    def turned_around(self) -> Direction:
        return _RIGHT_TURNS[_RIGHT_TURNS[self]]

    @classmethod
    def from_char(cls, char: str) -> Direction:
        try:
            return _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid character {char!r} for a direction.") from None

    def to_char(self) -> str:
        return _TO_CHAR[self]


_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_LEFT_TURNS = {after: before for before, after in _RIGHT_TURNS.items()}
_TO_CHAR = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}
_FROM_CHAR = {char: direction for direction, char in _TO_CHAR.items()}


@dataclass(frozen=True, order=True)
class Position:
    """A point on an integer grid."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Position:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2D:
        if not isinstance(other, Position):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def neighbours(self) -> list[Position]:
        return [
            Position(self.x + 1, self.y),
            Position(self.x - 1, self.y),
            Position(self.x, self.y + 1),
            Position(self.x, self.y - 1),
        ]

    def mirrored_across(self, other: Position) -> Position:
        return Position(2 * other.x - self.x, 2 * other.y - self.y)

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, bounds: Bounds) -> Position | None:
        """Return this position if it lies within bounds, otherwise None."""
        return self if bounds.contains(self) else None

    def valid_neighbours(self, bounds: Bounds) -> set[Position]:
        return {pos for pos in self.neighbours() if bounds.contains(pos)}