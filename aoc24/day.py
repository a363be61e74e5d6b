"""Advent day numbers, valid from 1 to 25."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterator
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")


class DayParseError(ValueError):
    """Raised when a value is not a day number between 1 and 25."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A day of advent; displays as a two digit number."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DayParseError()
        if not 1 <= self.value <= 25:
            raise DayParseError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day from its decimal text form."""
        if not _UNSIGNED.fullmatch(text):
            raise DayParseError()
        return cls(int(text))

    def __str__(self) -> str:
        return f"{self.value:02d}"

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self.value < other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(1, 26):
        yield Day(number)