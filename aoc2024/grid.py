"""A rectangular grid of values addressed by positions."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .geometry import Bounds, Position

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Grid(Generic[T]):
    """Rows of values; positions are (x, y) with x the column."""

    rows: list[list[T]]
    bounds: Bounds

    @classmethod
    def filled(cls, bounds: Bounds, fill: T) -> Grid[T]:
        rows = [[fill for _ in range(bounds.width)] for _ in range(bounds.height)]
        return cls(rows, bounds)

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], convert: Callable[[str], T] | None = None
    ) -> Grid[T]:
        """Build a grid from text lines, converting every character."""
        rows = [[convert(c) if convert else c for c in line] for line in lines]
        if not rows:
            raise ValueError("A grid needs at least one line.")
        return cls(rows, Bounds(len(rows[0]), len(rows)))

    def positions(self) -> Iterator[Position]:
        """Yield every position, column by column."""
        for x in range(self.bounds.width):
            for y in range(self.bounds.height):
                yield Position(x, y)

    def _check(self, position: Position) -> None:
        if not self.bounds.contains(position):
            raise IndexError(f"{position} lies outside {self.bounds}")

    def __getitem__(self, position: Position) -> T:
        self._check(position)
        return self.rows[position.y][position.x]

    def __setitem__(self, position: Position, value: T) -> None:
        self._check(position)
        self.rows[position.y][position.x] = value

    def find(self, value: T) -> set[Position]:
        return {pos for pos in self.positions() if self[pos] == value}

    def contiguous_region(self, position: Position) -> set[Position]:
        """Return the positions connected to position through equal values."""
        target = self[position]
        visited: set[Position] = set()
        to_visit = deque([position])
        while to_visit:
            current = to_visit.popleft()
            if current in visited:
                continue
            visited.add(current)
            to_visit.extend(
                neighbour
                for neighbour in current.valid_neighbours(self.bounds)
                if self[neighbour] == target
            )
        return visited

    def pretty(self, to_char: Callable[[T], str] = str) -> str:
        return "\n".join("".join(to_char(value) for value in row) for row in self.rows)

    def map(self, func: Callable[[T], U]) -> Grid[U]:
        return Grid([[func(value) for value in row] for row in self.rows], self.bounds)