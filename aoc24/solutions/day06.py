"""Day 6: a guard patrolling a lab and the loops one obstacle can cause."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aoc24.runner import solution_main

DAY = 6

Pos = tuple[int, int]


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> Pos:
        return self.value

    def turn_right(self) -> Direction:
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class _Lab:
    width: int
    height: int
    obstacles: frozenset[Pos]
    start: Pos

    def contains(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height


def _parse(text: str) -> _Lab:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    obstacles = set()
    start = None
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "#":
                obstacles.add((x, y))
            elif char == "^":
                start = (x, y)
            elif char != ".":
                raise ValueError(f"unexpected character: {char}")
    if start is None:
        raise ValueError("no guard on the map")
    return _Lab(len(lines[0]), len(lines), frozenset(obstacles), start)


def _walk(lab: _Lab, extra: Pos | None = None) -> tuple[set[Pos], bool]:
    """Follow the guard; return the tiles visited and whether she loops."""
    pos = lab.start
    direction = Direction.NORTH
    visited = {pos}
    seen: set[tuple[Pos, Direction]] = set()
    while True:
        dx, dy = direction.delta
        nxt = (pos[0] + dx, pos[1] + dy)
        if not lab.contains(nxt):
            return visited, False
        if nxt in lab.obstacles or nxt == extra:
            direction = direction.turn_right()
            continue
        pos = nxt
        visited.add(pos)
        state = (pos, direction)
        if state in seen:
            return visited, True
        seen.add(state)


def part_one(text: str) -> int:
    visited, _ = _walk(_parse(text))
    return len(visited)


def part_two(text: str) -> int:
    lab = _parse(text)
    visited, _ = _walk(lab)
    visited.discard(lab.start)
    return sum(1 for candidate in visited if _walk(lab, candidate)[1])


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)