"""Claw Contraption: pressing buttons to reach prizes."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from itertools import islice

from .file_io import lines_from_file
from .geometry import Vec2D

_BUTTON_A = re.compile(r"Button A: X\+(\d+), Y\+(\d+)")
_BUTTON_B = re.compile(r"Button B: X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")
_PRIZE_OFFSET = 10_000_000_000_000


def _cost(press_a: int, press_b: int) -> int:
    return 3 * press_a + press_b


def _search(pattern: re.Pattern[str], text: str, what: str) -> Vec2D:
    match = pattern.search(text)
    if match is None:
        raise ValueError(f"{what} data not found.")
    return Vec2D(int(match.group(1)), int(match.group(2)))


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        return -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def _restrict(
    low: int | None, high: int | None, coef: int, const: int
) -> tuple[int | None, int | None] | None:
    """Intersect [low, high] with {k : const + k * coef >= 0}; None if empty."""
    if coef > 0:
        bound = -(const // coef)
        low = bound if low is None else max(low, bound)
    elif coef < 0:
        bound = const // -coef
        high = bound if high is None else min(high, bound)
    elif const < 0:
        return None
    if low is not None and high is not None and low > high:
        return None
    return low, high


def _cheapest_parallel(a: Vec2D, b: Vec2D, prize: Vec2D) -> int | None:
    """Cheapest win when both buttons move along the same line."""
    usable = [
        (ac, bc, pc)
        for ac, bc, pc in ((a.x, b.x, prize.x), (a.y, b.y, prize.y))
        if (ac, bc) != (0, 0)
    ]
    if not usable:
        return 0 if prize == Vec2D(0, 0) else None
    ac, bc, pc = usable[0]
    g, x, y = _extended_gcd(ac, bc)
    if pc % g:
        return None
    i0, j0 = x * (pc // g), y * (pc // g)
    s, t = bc // g, ac // g
    bounds = _restrict(None, None, s, i0)
    if bounds is None:
        return None
    bounds = _restrict(*bounds, -t, j0)
    if bounds is None:
        return None
    low, high = bounds
    slope = 3 * s - t
    if slope > 0:
        k = low
    elif slope < 0:
        k = high
    else:
        k = low if low is not None else high
    if k is None:
        return None
    presses_a, presses_b = i0 + k * s, j0 - k * t
    if a * presses_a + b * presses_b != prize:
        return None
    return _cost(presses_a, presses_b)


@dataclass(frozen=True)
class ClawMachine:
    a: Vec2D
    b: Vec2D
    prize: Vec2D

    @classmethod
    def from_text(cls, text: str) -> ClawMachine:
        return cls(
            _search(_BUTTON_A, text, "Button A"),
            _search(_BUTTON_B, text, "Button B"),
            _search(_PRIZE, text, "Prize"),
        )

    def cheapest_win(self) -> int | None:
        """Exact solution of the two linear equations, if non-negative and integral."""
        a_orth = Vec2D(-self.a.y, self.a.x)
        b_orth = Vec2D(-self.b.y, self.b.x)
        determinant = b_orth.dot(self.a)
        if determinant == 0:
            return _cheapest_parallel(self.a, self.b, self.prize)
        numerator = Vec2D(b_orth.dot(self.prize), -a_orth.dot(self.prize))
        if numerator.x % determinant or numerator.y % determinant:
            return None
        presses_a, presses_b = numerator.x // determinant, numerator.y // determinant
        if presses_a >= 0 and presses_b >= 0:
            return _cost(presses_a, presses_b)
        return None

    def cheapest_win_easy(self) -> int | None:
        """Brute force over at most 100 presses of button A."""
        (a0, a1), (b0, b1), (p0, p1) = self.a, self.b, self.prize
        from math import gcd

        if p0 % gcd(a0, b0) or p1 % gcd(a1, b1):
            return None
        max_a = min(p0 // a0, p1 // a1, 100)
        costs = []
        for presses_a in range(max_a + 1):
            remainder = self.prize - self.a * presses_a
            if (
                remainder.x % b0 == 0
                and remainder.y % b1 == 0
                and remainder.x // b0 == remainder.y // b1
            ):
                costs.append(_cost(presses_a, remainder.x // b0))
        return min(costs, default=None)


def parse_machines(lines: Iterable[str]) -> list[ClawMachine]:
    """Read machines from paragraphs of four lines each."""
    iterator = iter(lines)
    machines = []
    while chunk := list(islice(iterator, 4)):
        machines.append(ClawMachine.from_text(" ".join(chunk)))
    return machines


def part1(path: str) -> int:
    wins = (machine.cheapest_win_easy() for machine in parse_machines(lines_from_file(path)))
    return sum(win for win in wins if win is not None)


def part2(path: str) -> int:
    offset = Vec2D(_PRIZE_OFFSET, _PRIZE_OFFSET)
    machines = [
        replace(machine, prize=machine.prize + offset)
        for machine in parse_machines(lines_from_file(path))
    ]
    wins = (machine.cheapest_win() for machine in machines)
    return sum(win for win in wins if win is not None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 13.")
    parser.add_argument("path", nargs="?", default="input/input13.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))