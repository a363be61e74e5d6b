"""A rectangular grid of tiles addressed by (x, y)."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Grid(Generic[T]):
    """Row-major tiles; a grid of unknown height grows as tiles are written."""

    def __init__(
        self,
        width: int,
        height: int | None,
        default_factory: Callable[[], T] | None,
    ) -> None:
        if width < 1:
            raise ValueError(f"grid width must be positive, got {width}")
        self.width = width
        self._height = height
        self._default_factory = default_factory
        if height is None:
            self._tiles: list[T] = []
        else:
            if default_factory is None:
                raise ValueError("a grid of known height needs a default factory")
            self._tiles = [default_factory() for _ in range(width * height)]

    @classmethod
    def with_unknown_height(cls, width: int, default_factory: Callable[[], T]) -> Grid[T]:
        """Create an empty grid whose height follows from the tiles written."""
        return cls(width, None, default_factory)

    @classmethod
    def parse_ascii(
        cls,
        text: str,
        from_char: Callable[[str], T],
        default_factory: Callable[[], T] | None = None,
    ) -> Grid[T]:
        """Build a grid from lines of characters, one tile per character."""
        lines = _lines(text)
        if not lines:
            raise ValueError("cannot parse a grid from empty text")
        grid = cls(len(lines[0]), None, default_factory)
        grid._height = len(lines)
        grid._tiles = [from_char(char) for line in lines for char in line]
        return grid

    @property
    def height(self) -> int:
        if self._height is not None:
            return self._height
        return (len(self._tiles) + 1) // self.width

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def find_tile_pos(self, check: Callable[[T], bool]) -> tuple[int, int] | None:
        """Return the first (x, y) in row order whose tile passes check."""
        for y in range(self.height):
            for x in range(self.width):
                if check(self[x, y]):
                    return (x, y)
        return None

    def _index(self, x: int, y: int) -> int:
        if not 0 <= x < self.width:
            raise IndexError(f"x out of range: {x}")
        if y < 0 or (self._height is not None and y >= self._height):
            raise IndexError(f"y out of range: {y}")
        return x + y * self.width

    def _fill_to(self, index: int) -> None:
        missing = index + 1 - len(self._tiles)
        if missing <= 0:
            return
        if self._default_factory is None:
            raise IndexError(f"no tile at index {index}")
        self._tiles.extend(self._default_factory() for _ in range(missing))

    def __getitem__(self, pos: tuple[int, int]) -> T:
        x, y = pos
        index = self._index(x, y)
        self._fill_to(index)
        return self._tiles[index]

    def __setitem__(self, pos: tuple[int, int], tile: T) -> None:
        x, y = pos
        index = self._index(x, y)
        self._fill_to(index)
        self._tiles[index] = tile

    def tiles(self) -> Iterator[T]:
        return iter(self._tiles)

    def render(self, tile_to_char: Callable[[T], str]) -> str:
        """Return the grid as text, one line per row."""
        parts: list[str] = []
        for i, tile in enumerate(self._tiles):
            parts.append(tile_to_char(tile))
            if i % self.width == self.width - 1:
                parts.append("\n")
        return "".join(parts)

    def print(self, tile_to_char: Callable[[T], str] = str) -> None:
        print(self.render(tile_to_char), end="")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self._height == other._height
            and self._tiles == other._tiles
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, tiles={len(self._tiles)})"