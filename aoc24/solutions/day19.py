"""Day 19: arranging towels into requested stripe patterns."""

from __future__ import annotations

from aoc24.runner import solution_main

DAY = 19


def _parse(text: str) -> tuple[list[str], list[str]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("expected a line of towel patterns")
    towels = [towel for towel in lines[0].split(", ") if towel]
    designs = [line for line in lines[1:] if line]
    return towels, designs


def _arrangements(design: str, towels: list[str]) -> int:
    ways = [0] * (len(design) + 1)
    ways[0] = 1
    for start in range(len(design)):
        if not ways[start]:
            continue
        for towel in towels:
            if design.startswith(towel, start):
                ways[start + len(towel)] += ways[start]
    return ways[len(design)]


def part_one(text: str) -> int:
    towels, designs = _parse(text)
    return sum(1 for design in designs if _arrangements(design, towels) > 0)


def part_two_brute(text: str) -> int:
    """Count all arrangements by enumerating every one of them."""
    towels, designs = _parse(text)
    count = 0
    for design in designs:
        stack = [design]
        while stack:
            rest = stack.pop()
            for towel in towels:
                if rest.startswith(towel):
                    remainder = rest[len(towel):]
                    if remainder:
                        stack.append(remainder)
                    else:
                        count += 1
    return count


def part_two(text: str) -> int:
    towels, designs = _parse(text)
    return sum(_arrangements(design, towels) for design in designs)


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)