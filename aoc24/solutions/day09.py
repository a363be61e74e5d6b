"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

from dataclasses import dataclass

from aoc24.runner import solution_main

DAY = 9

_DIGITS = frozenset("0123456789")


@dataclass
class _Span:
    width: int
    file_id: int | None


def _widths(text: str) -> list[int]:
    stripped = text.strip()
    if not stripped or not set(stripped) <= _DIGITS:
        raise ValueError("a disk map is a non-empty string of decimal digits")
    return [int(char) for char in stripped]


def _spans(text: str) -> list[_Span]:
    return [
        _Span(width, index // 2 if index % 2 == 0 else None)
        for index, width in enumerate(_widths(text))
    ]


def part_one(text: str) -> int:
    blocks: list[int | None] = []
    for span in _spans(text):
        blocks.extend([span.file_id] * span.width)

    left, right = 0, len(blocks) - 1
    while True:
        while left <= right and blocks[left] is not None:
            left += 1
        while right >= left and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None

    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def part_two(text: str) -> int:
    spans = _spans(text)

    read_pos = len(spans)
    while read_pos > 0:
        read_pos -= 1
        span = spans[read_pos]
        if span.file_id is None:
            continue
        found = next(
            (
                index
                for index, hole in enumerate(spans[:read_pos])
                if hole.file_id is None and hole.width >= span.width
            ),
            None,
        )
        if found is None:
            continue
        spans[found].width -= span.width
        spans.insert(found, _Span(span.width, span.file_id))
        span.file_id = None

    total = 0
    pos = 0
    for span in spans:
        if span.file_id is not None:
            total += span.file_id * sum(range(pos, pos + span.width))
        pos += span.width
    return total


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)