"""Reading puzzle inputs and examples from the data directory."""

from __future__ import annotations

from pathlib import Path

from aoc24.day import Day


def _as_day(day: Day | int) -> Day:
    return day if isinstance(day, Day) else Day(day)


def _data_path(folder: str, name: str) -> Path:
    return Path.cwd() / "data" / folder / name


def read_file(folder: str, day: Day | int) -> str:
    """Read data/<folder>/<day>.txt from the working directory."""
    return _data_path(folder, f"{_as_day(day)}.txt").read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day | int, part: int) -> str:
    """Read data/<folder>/<day>-<part>.txt from the working directory."""
    return _data_path(folder, f"{_as_day(day)}-{part}.txt").read_text(encoding="utf-8")