"""Day 8: antinodes of resonant antenna pairs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator

from aoc24.runner import solution_main

DAY = 8

Pos = tuple[int, int]


def _parse(text: str) -> tuple[int, int, dict[str, list[Pos]]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    antennas: dict[str, list[Pos]] = defaultdict(list)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas[char].append((x, y))
    return len(lines[0]), len(lines), antennas


def _pairs(antennas: dict[str, list[Pos]]) -> Iterator[tuple[Pos, Pos]]:
    for positions in antennas.values():
        for first in positions:
            for second in positions:
                if first != second:
                    yield first, second


def part_one(text: str) -> int:
    width, height, antennas = _parse(text)
    antinodes = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        x, y = 2 * x1 - x2, 2 * y1 - y2
        if 0 <= x < width and 0 <= y < height:
            antinodes.add((x, y))
    return len(antinodes)


def part_two(text: str) -> int:
    width, height, antennas = _parse(text)
    antinodes = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        dx, dy = x1 - x2, y1 - y2
        x, y = x1, y1
        while 0 <= x < width and 0 <= y < height:
            antinodes.add((x, y))
            x += dx
            y += dy
    return len(antinodes)


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)