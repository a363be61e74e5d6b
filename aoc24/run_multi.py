"""Running several solution days as child processes and collecting timings."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from collections.abc import Callable, Iterable
from pathlib import Path

from aoc24.day import Day, DayParseError, all_days
from aoc24.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from aoc24.timings import Timing, Timings

_SOLUTIONS_DIR = Path(__file__).resolve().parent / "solutions"


def _solution_path(day: Day) -> Path:
    return _SOLUTIONS_DIR / f"day{day}.py"


def _child_command(day: Day, interpreter_flags: Iterable[str], args: Iterable[str]) -> list[str]:
    return [sys.executable, *interpreter_flags, "-m", "aoc24.run_multi", str(day), *args]


def _child_env() -> dict[str, str]:
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "utf-8"
    return env


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run one day's solution, echo its output and return its stdout lines."""
    if not _solution_path(day).exists():
        return []

    flags = ["-O"] if is_release else []
    args = ["--time"] if is_timed else []
    command = _child_command(day, flags, args)

    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        env=_child_env(),
    ) as process:
        assert process.stdout is not None and process.stderr is not None
        errors = process.stderr

        def forward_stderr() -> None:
            for line in errors:
                print(line.rstrip("\n"), file=sys.stderr)

        thread = threading.Thread(target=forward_stderr)
        thread.start()

        output = []
        for line in process.stdout:
            line = line.rstrip("\n")
            print(line)
            output.append(line)

        thread.join()
        process.wait()
    return output


def _parse_float(text: str) -> float | None:
    if text != text.strip() or "_" in text or not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].split("(")[-1].split("@")[0].strip()

    if "ns" in timing:
        number, factor = timing.split("ns")[0], 1.0
    elif "µs" in timing:
        number, factor = timing.split("µs")[0], 1_000.0
    elif "ms" in timing:
        number, factor = timing.split("ms")[0], 1_000_000.0
    else:
        number, factor = timing.split("s")[0], 1_000_000_000.0

    value = _parse_float(number)
    if value is None:
        return None
    return timing, value * factor


def parse_exec_time(lines: Iterable[str], day: Day) -> Timing:
    """Collect the per-part timings printed by a timed solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)
    for line in lines:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos
    return timing


def run_multi(days: Iterable[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the given days in order; return their timings when timed."""
    wanted = set(days)
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in wanted:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None
    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}"
    )
    return result


def _solutions() -> dict[int, Callable[[list[str] | None], None]]:
    from aoc24.solutions import (
        day01,
        day02,
        day03,
        day04,
        day05,
        day06,
        day07,
        day08,
        day09,
        day10,
        day11,
        day12,
        day14,
        day17,
        day18,
        day19,
        day21,
    )

    modules = [
        day01, day02, day03, day04, day05, day06, day07, day08, day09,
        day10, day11, day12, day14, day17, day18, day19, day21,
    ]
    return {module.DAY: module.main for module in modules}


def _run_day(argv: list[str]) -> int:
    if not argv:
        print("usage: python -m aoc24.run_multi DAY [--time] [--submit PART]", file=sys.stderr)
        return 2
    try:
        day = Day.parse(argv[0])
    except DayParseError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    solution = _solutions().get(day.value)
    if solution is None:
        print(f"No solution for day {day}.", file=sys.stderr)
        return 1
    solution(argv[1:])

    import tracemalloc

    if tracemalloc.is_tracing():
        _, peak = tracemalloc.get_traced_memory()
        print(f"Peak traced memory: {peak} bytes", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(_run_day(sys.argv[1:]))