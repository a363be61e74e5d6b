"""Day 18: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

import heapq
import itertools
from collections import deque

from aoc24.runner import solution_main

DAY = 18

Pos = tuple[int, int]

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _parse(text: str) -> tuple[int, int, list[Pos]]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected the grid size and byte count on the first two lines")
    size = int(lines[0]) + 1
    count = int(lines[1])
    falling = []
    for line in lines[2:]:
        if not line:
            continue
        xs, sep, ys = line.partition(",")
        if not sep:
            raise ValueError(f"malformed coordinate: {line!r}")
        x, y = int(xs), int(ys)
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"coordinate outside the grid: {line!r}")
        falling.append((x, y))
    return size, count, falling


def _neighbours(pos: Pos, size: int, walls: set[Pos]):
    x, y = pos
    for dx, dy in _STEPS:
        nxt = (x + dx, y + dy)
        if 0 <= nxt[0] < size and 0 <= nxt[1] < size and nxt not in walls:
            yield nxt


def _shortest(size: int, walls: set[Pos]) -> int | None:
    """A* from the top-left to the bottom-right corner; None when blocked."""
    end = (size - 1, size - 1)
    best: dict[Pos, int] = {}
    counter = itertools.count()
    heap = [(0, next(counter), 0, (0, 0))]
    while heap:
        score, _, distance, pos = heapq.heappop(heap)
        if pos == end:
            return score
        distance += 1
        for nxt in _neighbours(pos, size, walls):
            candidate = distance + (end[0] - nxt[0]) + (end[1] - nxt[1])
            if best.get(nxt, float("inf")) > candidate:
                best[nxt] = candidate
                heapq.heappush(heap, (candidate, next(counter), distance, nxt))
    return None


def part_one(text: str) -> int | None:
    size, count, falling = _parse(text)
    return _shortest(size, set(falling[:count]))


def part_one_bfs(text: str) -> int | None:
    """Breadth-first search for the same shortest path length."""
    size, count, falling = _parse(text)
    walls = set(falling[:count])
    start, end = (0, 0), (size - 1, size - 1)
    if start in walls:
        return None
    distances = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            return distances[pos]
        for nxt in _neighbours(pos, size, walls):
            if nxt not in distances:
                distances[nxt] = distances[pos] + 1
                queue.append(nxt)
    return None


def part_two(text: str) -> str:
    size, min_bytes, falling = _parse(text)
    for count in range(min_bytes, len(falling)):
        if _shortest(size, set(falling[:count])) is None:
            x, y = falling[count - 1]
            return f"{x},{y}"
    raise ValueError("no byte blocks the path to the exit")


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)