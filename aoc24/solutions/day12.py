"""Day 12: fencing garden regions by perimeter and by number of sides."""

from __future__ import annotations

from collections.abc import Iterator

from aoc24.runner import solution_main

DAY = 12

Pos = tuple[int, int]
Fence = tuple[Pos, Pos]

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _regions(text: str) -> Iterator[set[Pos]]:
    plots = {
        (x, y): crop
        for y, line in enumerate(text.splitlines())
        for x, crop in enumerate(line)
    }
    seen: set[Pos] = set()
    for start, crop in plots.items():
        if start in seen:
            continue
        region: set[Pos] = set()
        stack = [start]
        while stack:
            pos = stack.pop()
            if pos in region:
                continue
            region.add(pos)
            x, y = pos
            for dx, dy in _DIRECTIONS:
                nxt = (x + dx, y + dy)
                if plots.get(nxt) == crop and nxt not in region:
                    stack.append(nxt)
        seen |= region
        yield region


def _fences(region: set[Pos]) -> set[Fence]:
    return {
        ((x, y), (dx, dy))
        for x, y in region
        for dx, dy in _DIRECTIONS
        if (x + dx, y + dy) not in region
    }


def _sides(fences: set[Fence]) -> int:
    """Count straight sides: fences with no collinear neighbour before them."""
    count = 0
    for (x, y), (dx, dy) in fences:
        step = (1, 0) if dy != 0 else (0, 1)
        if ((x - step[0], y - step[1]), (dx, dy)) not in fences:
            count += 1
    return count


def part_one(text: str) -> int:
    return sum(len(region) * len(_fences(region)) for region in _regions(text))


def part_two(text: str) -> int:
    return sum(len(region) * _sides(_fences(region)) for region in _regions(text))


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)