"""Day 10: scoring and rating hiking trailheads on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator
from functools import cache

from aoc24.runner import solution_main

DAY = 10

Pos = tuple[int, int]

_DIGITS = frozenset("0123456789")


def _parse(text: str) -> dict[Pos, int]:
    heights: dict[Pos, int] = {}
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char not in _DIGITS:
                raise ValueError(f"unexpected character: {char!r}")
            heights[(x, y)] = int(char)
    if not heights:
        raise ValueError("empty map")
    return heights


def _neighbours(pos: Pos) -> Iterator[Pos]:
    x, y = pos
    for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        yield (x + dx, y + dy)


def _trailheads(heights: dict[Pos, int]) -> Iterator[Pos]:
    return (pos for pos, height in heights.items() if height == 0)


def _score(heights: dict[Pos, int], start: Pos) -> int:
    """Number of distinct height-9 positions reachable from start."""
    seen: set[Pos] = set()
    stack = [start]
    while stack:
        pos = stack.pop()
        target = heights[pos] + 1
        for nxt in _neighbours(pos):
            if heights.get(nxt) == target and nxt not in seen:
                seen.add(nxt)
                if target < 9:
                    stack.append(nxt)
    return sum(1 for pos in seen if heights[pos] == 9)


def part_one(text: str) -> int:
    heights = _parse(text)
    return sum(_score(heights, start) for start in _trailheads(heights))


def part_two(text: str) -> int:
    heights = _parse(text)

    @cache
    def rating(pos: Pos) -> int:
        height = heights[pos]
        if height == 9:
            return 1
        return sum(rating(nxt) for nxt in _neighbours(pos) if heights.get(nxt) == height + 1)

    return sum(rating(start) for start in _trailheads(heights))


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)