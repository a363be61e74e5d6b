"""Handlers for the command line subcommands."""

from __future__ import annotations

import subprocess
import sys

from aoc24 import aoc_cli, readme_benchmarks
from aoc24.day import Day, all_days
from aoc24.run_multi import run_multi
from aoc24.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _ensure_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(_AOC_MISSING)


def handle_all(is_release: bool) -> None:
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    _ensure_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def handle_read(day: Day) -> None:
    _ensure_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def build_solve_args(
    day: Day, release: bool, dhat: bool, submit_part: int | None
) -> list[str]:
    """Command line that runs one day's solution in a child interpreter."""
    args = [sys.executable]
    if dhat:
        args += ["-X", "tracemalloc"]
    elif release:
        args.append("-O")
    args += ["-m", "aoc24.run_multi", str(day)]
    if submit_part is not None:
        args += ["--submit", str(submit_part)]
    return args


def handle_solve(day: Day, release: bool, dhat: bool, submit_part: int | None) -> int:
    process = subprocess.run(build_solve_args(day, release, dhat, submit_part), check=False)
    return process.returncode


def select_days(day: Day | None, run_all: bool, stored: Timings) -> set[Day]:
    """Days to benchmark: the one given, all, or those not fully benched yet."""
    if day is not None:
        return {day}
    if run_all:
        return set(all_days())
    return {d for d in all_days() if not stored.is_day_complete(d)}


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    stored = Timings.read_from_file()
    timings = run_multi(select_days(day, run_all, stored), True, True)
    assert timings is not None

    if not store:
        return
    merged = stored.merge(timings)
    merged.store_file()

    print()
    try:
        readme_benchmarks.update(merged)
    except (readme_benchmarks.ReadmeError, OSError):
        print("Failed to store updated benchmarks.", file=sys.stderr)
    else:
        print("Stored updated benchmarks.")