"""Day 11: counting plutonian pebbles after repeated blinks."""

from __future__ import annotations

from functools import cache

from aoc24.runner import solution_main

DAY = 11


@cache
def _count_stones(stone: int, steps: int) -> int:
    """Number of stones one stone becomes after the given blinks."""
    if steps == 0:
        return 1
    if stone == 0:
        return _count_stones(1, steps - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        divisor = 10 ** (len(digits) // 2)
        return _count_stones(stone % divisor, steps - 1) + _count_stones(
            stone // divisor, steps - 1
        )
    return _count_stones(stone * 2024, steps - 1)


def _blink(text: str, steps: int) -> int:
    return sum(_count_stones(int(stone), steps) for stone in text.split())


def part_one(text: str) -> int:
    return _blink(text, 25)


def part_two(text: str) -> int:
    return _blink(text, 75)


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)