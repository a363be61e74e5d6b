"""Day 1: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter

from aoc24.runner import solution_main

DAY = 1


def _parse(text: str) -> tuple[list[int], list[int]]:
    left, right = [], []
    for line in text.splitlines():
        a, b = line.split("   ", 1)
        left.append(int(a))
        right.append(int(b))
    return sorted(left), sorted(right)


def part_one(text: str) -> int:
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(left, right))


def part_two(text: str) -> int:
    left, right = _parse(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)