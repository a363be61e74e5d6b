"""Day 14: security robots wrapping around a bathroom floor."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc24.runner import solution_main

DAY = 14

SECONDS = 100

_ROBOT = re.compile(r"p=([0-9]+),([0-9]+) v=(-?[0-9]+),(-?[0-9]+)")


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    vx: int
    vy: int


def _parse(text: str) -> tuple[int, int, list[_Robot]]:
    lines = text.splitlines()
    if len(lines) < 2 or not lines[0].isascii() or not lines[0].isdigit():
        raise ValueError("expected the floor width on the first line")
    if not lines[1].isascii() or not lines[1].isdigit():
        raise ValueError("expected the floor height on the second line")
    robots = []
    for line in lines[2:]:
        match = _ROBOT.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed robot: {line!r}")
        robots.append(_Robot(*(int(group) for group in match.groups())))
    return int(lines[0]), int(lines[1]), robots


def part_one(text: str) -> int:
    width, height, robots = _parse(text)
    mid_x, mid_y = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x = (robot.x + SECONDS * robot.vx) % width
        y = (robot.y + SECONDS * robot.vy) % height
        if x == mid_x or y == mid_y:
            continue
        quadrants[(2 if x > mid_x else 0) + (1 if y > mid_y else 0)] += 1
    first, second, third, fourth = quadrants
    return first * second * third * fourth


def part_two(text: str) -> None:
    """Finding the picture needs visual inspection; there is no computed answer."""
    _parse(text)
    return None


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)