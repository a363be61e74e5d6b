"""Day 21: shortest button sequences through chains of keypads."""

from __future__ import annotations

from functools import cache

from aoc24.runner import solution_main

DAY = 21

_NUMERIC = {
    "7": (0, 0), "8": (1, 0), "9": (2, 0),
    "4": (0, 1), "5": (1, 1), "6": (2, 1),
    "1": (0, 2), "2": (1, 2), "3": (2, 2),
    "X": (0, 3), "0": (1, 3), "A": (2, 3),
}

_DIRECTIONAL = {
    "X": (0, 0), "^": (1, 0), "A": (2, 0),
    "<": (0, 1), "v": (1, 1), ">": (2, 1),
}


def _position(keypad: dict[str, tuple[int, int]], key: str) -> tuple[int, int]:
    try:
        return keypad[key]
    except KeyError:
        raise ValueError(f"key not on keypad: {key!r}") from None


def _segments(start: tuple[int, int], end: tuple[int, int]) -> tuple[str, str]:
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    xseg = ">" * dx if dx >= 0 else "<" * -dx
    yseg = "v" * dy if dy >= 0 else "^" * -dy
    return xseg, yseg


def _numeric_length(code: str, depth: int) -> int:
    keys = "A" + code
    length = 0
    for first, second in zip(keys, keys[1:]):
        start = _position(_NUMERIC, first)
        end = _position(_NUMERIC, second)
        xseg, yseg = _segments(start, end)
        if not xseg or not yseg:
            options = [xseg + yseg + "A"]
        elif start[0] == 0 and end[1] == 3:
            options = [xseg + yseg + "A"]
        elif end[0] == 0 and start[1] == 3:
            options = [yseg + xseg + "A"]
        else:
            options = [xseg + yseg + "A", yseg + xseg + "A"]
        length += min(_keypad_length(option, depth - 1) for option in options)
    return length


@cache
def _keypad_length(code: str, depth: int) -> int:
    keys = "A" + code
    length = 0
    for first, second in zip(keys, keys[1:]):
        if first == second:
            options = ["A"]
        else:
            start = _position(_DIRECTIONAL, first)
            end = _position(_DIRECTIONAL, second)
            xseg, yseg = _segments(start, end)
            if not xseg or not yseg:
                options = [xseg + yseg + "A"]
            elif start == (0, 1):
                options = [xseg + yseg + "A"]
            elif end == (0, 1):
                options = [yseg + xseg + "A"]
            else:
                options = [xseg + yseg + "A", yseg + xseg + "A"]
        if depth == 0:
            length += min(len(option) for option in options)
        else:
            length += min(_keypad_length(option, depth - 1) for option in options)
    return length


def _complexity_sum(text: str, depth: int) -> int:
    return sum(_numeric_length(code, depth) * int(code[0:3]) for code in text.splitlines())


def part_one(text: str) -> int:
    return _complexity_sum(text, 2)


def part_two(text: str) -> int:
    return _complexity_sum(text, 25)


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)