"""Restroom Redoubt: robots moving on a wrapping grid."""

from __future__ import annotations

import argparse
import math
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from .file_io import lines_from_file
from .geometry import Vec2D

_ROBOT = re.compile(r"p=(.*?),(.*?) v=(.*?),(.*?)$")
_SKIPPED_SECONDS = 6900
_FRAMES = 200


@dataclass(frozen=True)
class Torus:
    width: int
    height: int


@dataclass
class Robot:
    pos: Vec2D
    vel: Vec2D

    def move_on_torus(self, seconds: int, torus: Torus) -> None:
        moved = self.pos + self.vel * seconds
        self.pos = Vec2D(moved.x % torus.width, moved.y % torus.height)


def parse_robots(lines: Iterable[str]) -> list[Robot]:
    robots = []
    for line in lines:
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"Robot data could not be detected: {line!r}")
        px, py, vx, vy = (int(value) for value in match.groups())
        robots.append(Robot(Vec2D(px, py), Vec2D(vx, vy)))
    return robots


def advance_pack(robots: Iterable[Robot], seconds: int, torus: Torus) -> None:
    for robot in robots:
        robot.move_on_torus(seconds, torus)


def safety_factor(robots: Iterable[Robot], torus: Torus) -> int:
    """Product of robot counts in the four quadrants, ignoring the middle lines."""
    mid_x, mid_y = torus.width // 2, torus.height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter(
        (robot.pos.x > mid_x, robot.pos.y > mid_y)
        for robot in robots
        if robot.pos.x != mid_x and robot.pos.y != mid_y
    )
    return math.prod(quadrants.values())


def render(robots: Iterable[Robot], torus: Torus) -> str:
    """Draw robot counts per cell, '.' where there are none."""
    counts = Counter(robot.pos for robot in robots)
    return "\n".join(
        "".join(
            str(counts[Vec2D(x, y)]) if Vec2D(x, y) in counts else "."
            for x in range(torus.width)
        )
        for y in range(torus.height)
    )


def part1(path: str, torus: Torus) -> int:
    robots = parse_robots(lines_from_file(path))
    advance_pack(robots, 100, torus)
    return safety_factor(robots, torus)


def part2(path: str, torus: Torus) -> str:
    """Print frames for visual inspection of the Christmas tree."""
    robots = parse_robots(lines_from_file(path))
    advance_pack(robots, _SKIPPED_SECONDS, torus)
    for i in range(1, _FRAMES + 1):
        print(f"{i + _SKIPPED_SECONDS}:")
        advance_pack(robots, 1, torus)
        print(render(robots, torus) + "\n" * 5)
    return "Look for the ||s and =s"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 14.")
    parser.add_argument("path", nargs="?", default="input/input14.txt")
    args = parser.parse_args(argv)
    torus = Torus(101, 103)
    print("Answer to part 1:")
    print(part1(args.path, torus))
    print("Good luck with part 2!")
    print(part2(args.path, torus))