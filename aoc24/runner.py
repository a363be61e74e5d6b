"""Running, timing, printing and submitting solution parts."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from aoc24 import aoc_cli
from aoc24.day import Day
from aoc24.files import read_file

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SUBMIT_USAGE = "Unexpected command-line input. Format: solve 1 --submit 1"
_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)
_UNSIGNED = re.compile(r"\+?[0-9]+")


def format_duration(nanos: int, samples: int) -> str:
    """Format a duration in nanoseconds with one decimal and its unit."""
    if nanos >= 1_000_000_000:
        divisor, unit = 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        divisor, unit = 1_000_000, "ms"
    elif nanos >= 1_000:
        divisor, unit = 1_000, "µs"
    else:
        divisor, unit = 1, "ns"
    value = (Decimal(nanos) / Decimal(divisor)).quantize(Decimal("0.1"), ROUND_HALF_UP)
    if samples == 1:
        return f" ({value}{unit})"
    return f" ({value}{unit} @ {samples} samples)"


def format_result(result: Any, part: str, duration_str: str) -> str:
    """Text printed for a result; an empty duration marks an intermediate line."""
    intermediate = duration_str == ""
    if result is None:
        if intermediate:
            return f"{part}: ✖"
        return f"\r{part}: ✖             \n"
    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            return line
        return f"\r{line}\n{text}\n"
    line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
    if intermediate:
        return line
    return f"\r{line}\n"


def _bench(func: Callable[[str], Any], text: str, base_nanos: int) -> tuple[int, int]:
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = min(max(1_000_000_000 // max(base_nanos, 10), 10), 10_000)
    timings = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(text)
        timings.append(time.perf_counter_ns() - start)
    return sum(timings) // len(timings), iterations


def _usage_exit() -> None:
    print(_SUBMIT_USAGE, file=sys.stderr)
    raise SystemExit(1)


def _submit_result(result: Any, day: Day, part: int, args: list[str]):
    if "--submit" not in args:
        return None
    if len(args) < 2:
        _usage_exit()
    index = args.index("--submit") + 1
    if index >= len(args) or not _UNSIGNED.fullmatch(args[index]) or int(args[index]) > 255:
        _usage_exit()
    if int(args[index]) != part:
        return None
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(_AOC_MISSING, file=sys.stderr)
        raise SystemExit(1) from None
    print("Submitting result via aoc-cli...")
    try:
        return aoc_cli.submit(day, part, str(result))
    except aoc_cli.AocCommandError as err:
        print(f"failed to call aoc-cli: {err}", file=sys.stderr)
        return None


def run_part(
    func: Callable[[str], Any],
    text: str,
    day: Day,
    part: int,
    argv: list[str] | None = None,
) -> Any:
    """Run one part, print its result and timing, and submit it if asked."""
    args = sys.argv[1:] if argv is None else list(argv)
    part_str = f"Part {part}"

    start = time.perf_counter_ns()
    result = func(text)
    base_nanos = time.perf_counter_ns() - start
    print(format_result(result, part_str, ""), end="", flush=True)

    if "--time" in args:
        nanos, samples = _bench(func, text, base_nanos)
    else:
        nanos, samples = base_nanos, 1

    print(format_result(result, part_str, format_duration(nanos, samples)), end="", flush=True)

    if result is not None:
        _submit_result(result, day, part, args)
    return result


def solution_main(
    day: Day | int,
    parts: Mapping[int, Callable[[str], Any]] | Iterable[tuple[int, Callable[[str], Any]]],
    argv: list[str] | None = None,
) -> None:
    """Read a day's input and run each given part on it."""
    day = day if isinstance(day, Day) else Day(day)
    text = read_file("inputs", day)
    items = parts.items() if isinstance(parts, Mapping) else parts
    for part, func in items:
        run_part(func, text, day, part, argv)