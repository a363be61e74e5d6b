"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aoc24.day import Day, DayParseError

TIMINGS_FILE_PATH = Path("data") / "timings.json"


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


def _optional_string(value: dict[str, Any], key: str) -> str | None:
    if key not in value:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    item = value[key]
    return item if isinstance(item, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    total_nanos: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "part_1": self.part_1,
            "part_2": self.part_2,
            "total_nanos": float(self.total_nanos),
        }

    @classmethod
    def from_json(cls, value: Any) -> Timing:
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        day_text = value.get("day")
        day = None
        if isinstance(day_text, str):
            try:
                day = Day.parse(day_text)
            except DayParseError:
                day = None
        if day is None:
            raise TimingsError("Expected timing.day to be a Day struct.")

        part_1 = _optional_string(value, "part_1")
        part_2 = _optional_string(value, "part_2")

        total = value.get("total_nanos")
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json_text(cls, text: str) -> Timings:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as err:
            raise TimingsError("not valid JSON file.") from err
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        data = document["data"]
        if not isinstance(data, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_json(item) for item in data])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(json.dumps(self.to_json(), indent=2), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; on any failure report it and return none."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            print(err, file=sys.stderr)
            return cls()
        try:
            return cls.from_json_text(text)
        except TimingsError as err:
            print(err, file=sys.stderr)
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine with new timings; entries of new win for the same day."""
        data = list(new.data)
        for timing in self.data:
            if not any(t.day == timing.day for t in data):
                data.append(timing)
        data.sort(key=lambda t: t.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        return sum(t.total_nanos for t in self.data) / 1_000_000

    def is_day_complete(self, day: Day | int) -> bool:
        return any(
            t.day == day and t.part_1 is not None and t.part_2 is not None
            for t in self.data
        )