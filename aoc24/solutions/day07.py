"""Day 7: calibration equations with add, multiply and concatenate."""

from __future__ import annotations

from collections.abc import Callable

from aoc24.runner import solution_main

DAY = 7

Operator = Callable[[int, int], int]


def _concat(a: int, b: int) -> int:
    digits = len(str(b)) if b > 0 else 0
    return a * 10**digits + b


def _add(a: int, b: int) -> int:
    return a + b


def _mul(a: int, b: int) -> int:
    return a * b


def _parse(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        result, sep, rest = line.partition(":")
        if not sep or not result.isdigit():
            raise ValueError(f"malformed equation: {line!r}")
        if not rest.startswith(" "):
            raise ValueError(f"no operands in equation: {line!r}")
        parts = rest[1:].split(" ")
        if not all(part.isdigit() for part in parts):
            raise ValueError(f"malformed operands: {line!r}")
        equations.append((int(result), [int(part) for part in parts]))
    return equations


def _can_compute(accum: int, operands: list[int], result: int, ops: tuple[Operator, ...]) -> bool:
    if not operands:
        return accum == result
    first, rest = operands[0], operands[1:]
    return any(_can_compute(op(accum, first), rest, result, ops) for op in ops)


def _calibration(text: str, ops: tuple[Operator, ...]) -> int:
    return sum(
        result
        for result, operands in _parse(text)
        if _can_compute(operands[0], operands[1:], result, ops)
    )


def part_one(text: str) -> int:
    return _calibration(text, (_add, _mul))


def part_two(text: str) -> int:
    return _calibration(text, (_add, _mul, _concat))


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)