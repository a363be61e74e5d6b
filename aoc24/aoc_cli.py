"""Calls into the external aoc command line tool."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence

from aoc24.day import Day

_UNSIGNED = re.compile(r"\+?[0-9]+")


class AocCommandError(Exception):
    """Base error for failed aoc invocations."""


class CommandNotFoundError(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallableError(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatusError(AocCommandError):
    def __init__(self, process: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.process = process


def check() -> None:
    """Raise CommandNotFoundError unless the aoc tool can be started."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True, check=False)
    except OSError as err:
        raise CommandNotFoundError() from err


def _input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def _puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def _year() -> int | None:
    value = os.environ.get("AOC_YEAR")
    if value is None or not _UNSIGNED.fullmatch(value):
        return None
    year = int(value)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Assemble the argument list for an aoc subcommand."""
    result = list(args)
    year = _year()
    if year is not None:
        result += ["--year", str(year)]
    result += ["--day", str(day), command]
    return result


def _call(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        process = subprocess.run(["aoc", *args], check=False)
    except OSError as err:
        raise CommandNotCallableError() from err
    if process.returncode != 0:
        raise BadExitStatusError(process)
    return process


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for a day."""
    args = build_args(
        "read", ["--description-only", "--puzzle-file", _puzzle_path(day)], day
    )
    return _call(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for a day."""
    input_path = _input_path(day)
    puzzle_path = _puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    process = _call(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return process


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit an answer for one part of a day."""
    # The tool expects part and answer after the subcommand.
    args = build_args("submit", [], day)
    args += [str(part), result]
    return _call(args)