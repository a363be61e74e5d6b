"""Writes the benchmark table into the README between two markers."""

from __future__ import annotations

from pathlib import Path

from aoc24.day import Day
from aoc24.timings import Timings

MARKER = "<!--- benchmarking table --->"


class ReadmeError(Exception):
    """Raised when the benchmark table cannot be located in the README."""


def get_path_for_bin(day: Day) -> str:
    return f"./aoc24/solutions/day{day}.py"


def locate_table(readme: str) -> tuple[int, int]:
    """Return the start and end offsets of the marked table."""
    positions = []
    start = 0
    while (index := readme.find(MARKER, start)) != -1:
        positions.append(index)
        start = index + len(MARKER)

    if len(positions) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return positions[0], positions[-1] + len(MARKER)


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        lines.append(
            f"| [Day {timing.day.value}]({get_path_for_bin(timing.day)}) "
            f"| `{timing.part_1 or '-'}` | `{timing.part_2 or '-'}` |"
        )
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return text with its benchmark table replaced."""
    start, end = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[:start] + table + text[end:]


def update(timings: Timings, path: str | Path = "README.md") -> None:
    path = Path(path)
    readme = path.read_bytes().decode("utf-8", errors="replace")
    content = update_content(readme, timings, timings.total_millis())
    path.write_bytes(content.encode("utf-8"))