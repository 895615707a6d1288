"""A fixed-size two-dimensional grid addressed by (x, y)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class Matrix:
    """A ``width`` by ``height`` grid filled row by row from ``rows``."""

    def __init__(self, width: int, height: int, rows: Sequence[Sequence[Any]]) -> None:
        if width < 0 or height < 0:
            raise ValueError("matrix dimensions must not be negative")
        if len(rows) != height or any(len(row) != width for row in rows):
            raise ValueError(f"rows do not form a {width}x{height} matrix")
        self.width = width
        self.height = height
        self._cells = [value for row in rows for value in row]

    def _index(self, key: tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("out of bounds")
        return y * self.width + x

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._cells[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._cells[self._index(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.width, self.height, self._cells) == (other.width, other.height, other._cells)

    def __repr__(self) -> str:
        rows = [self._cells[y * self.width:(y + 1) * self.width] for y in range(self.height)]
        return f"Matrix({self.width}, {self.height}, {rows!r})"