"""Day 4: a word search for XMAS and for crossed MAS."""

from __future__ import annotations

from aoc24.runner import solution_main

DAY = 4

_NEEDLES = frozenset({"XMAS", "SAMX"})
_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))
_MAS = frozenset({("M", "S"), ("S", "M")})


def _grid(text: str) -> list[str]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty word search")
    return lines


def _word(lines: list[str], x: int, y: int, dx: int, dy: int, length: int) -> str | None:
    chars = []
    for i in range(length):
        cx, cy = x + i * dx, y + i * dy
        if not (0 <= cy < len(lines) and 0 <= cx < len(lines[cy])):
            return None
        chars.append(lines[cy][cx])
    return "".join(chars)


def part_one(text: str) -> int:
    lines = _grid(text)
    return sum(
        1
        for y, line in enumerate(lines)
        for x in range(len(line))
        for dx, dy in _DIRECTIONS
        if _word(lines, x, y, dx, dy, 4) in _NEEDLES
    )


def part_two(text: str) -> int:
    lines = _grid(text)
    width, height = len(lines[0]), len(lines)
    count = 0
    for y in range(height - 2):
        for x in range(width - 2):
            if lines[y + 1][x + 1] != "A":
                continue
            falling = (lines[y][x], lines[y + 2][x + 2])
            rising = (lines[y][x + 2], lines[y + 2][x])
            if falling in _MAS and rising in _MAS:
                count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)