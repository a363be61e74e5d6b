"""Day 2: safety of reactor level reports."""

from __future__ import annotations

from itertools import pairwise

from aoc24.runner import solution_main

DAY = 2


def _is_safe(levels: list[int]) -> bool:
    pairs = list(pairwise(levels))
    ascending = all(a < b for a, b in pairs)
    descending = all(a > b for a, b in pairs)
    small_gaps = all(abs(a - b) <= 3 for a, b in pairs)
    return (ascending or descending) and small_gaps


def _reports(text: str) -> list[list[int]]:
    return [[int(value) for value in line.split()] for line in text.splitlines()]


def part_one(text: str) -> int:
    return sum(1 for levels in _reports(text) if _is_safe(levels))


def part_two(text: str) -> int:
    return sum(
        1
        for levels in _reports(text)
        if any(_is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels)))
    )


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)