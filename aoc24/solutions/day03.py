"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re

from aoc24.runner import solution_main

DAY = 3

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"(do\(\))|(don't\(\))|(mul\(([0-9]+),([0-9]+)\))")


def part_one(text: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text: str) -> int:
    enabled = True
    result = 0
    for match in _INSTRUCTION.finditer(text):
        if match.group(1):
            enabled = True
        elif match.group(2):
            enabled = False
        elif enabled:
            result += int(match.group(4)) * int(match.group(5))
    return result


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)