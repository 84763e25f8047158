"""A rectangular grid of single-digit values, stored row by row."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_SEPARATORS = re.compile(r"[\n ]")
_DIGITS = frozenset("0123456789")


@dataclass
class UGrid:
    """Digits laid out in ``rows`` rows of ``columns`` values each."""

    rows: int
    columns: int
    values: list[int] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> UGrid:
        """Parse one row per line; blank lines and spaces are ignored."""
        lines = [token for token in _SEPARATORS.split(text) if token]
        if not lines:
            raise ValueError("empty grid")
        values = [int(char) for line in lines for char in line if char in _DIGITS]
        return cls(rows=len(lines), columns=len(lines[0]), values=values)

    def index_to_coord(self, index: int) -> tuple[int, int]:
        """The ``(x, y)`` position of the value stored at ``index``."""
        if not 0 <= index < len(self.values):
            raise IndexError(
                f"index {index} out of grid range {self.rows}x{self.columns}"
            )
        return index % self.columns, index // self.columns

    def coord_to_index(self, x: int, y: int) -> int:
        """The storage index of position ``(x, y)``."""
        return y * self.columns + x

    def __getitem__(self, position: tuple[int, int]) -> int:
        x, y = position
        index = self.coord_to_index(x, y)
        if not 0 <= index < len(self.values):
            raise IndexError(f"position {position} is outside the grid")
        return self.values[index]

    def iter_row(self, index: int) -> Iterator[int]:
        start = index * self.columns
        return iter(self.values[start:start + self.columns])

    def iter_rows(self) -> Iterator[Iterator[int]]:
        return (self.iter_row(index) for index in range(self.rows))

    def iter_col(self, index: int) -> Iterator[int]:
        return iter(self.values[index::self.columns])

    def iter_columns(self) -> Iterator[Iterator[int]]:
        return (self.iter_col(index) for index in range(self.columns))

    def edge(self) -> list[int]:
        """Values on the border: first row, side pairs, then last row."""
        last_column_index = self.columns - 1

        def middle(column: Iterator[int]) -> list[int]:
            return [
                value
                for index, value in enumerate(column)
                if index not in (0, last_column_index)
            ]

        sides = zip(middle(self.iter_col(0)), middle(self.iter_col(last_column_index)))
        return [
            *self.iter_row(0),
            *(value for pair in sides for value in pair),
            *self.iter_row(self.rows - 1),
        ]

    def sub_grid_iter(self, row_range: range, col_range: range) -> Iterator[int]:
        """Values whose storage index falls inside both ranges."""
        for index, value in enumerate(self.values):
            if index % self.rows in row_range and index // self.columns in col_range:
                yield value

    def coord(self) -> list[tuple[tuple[int, int], int]]:
        """Every ``((x, y), value)`` pair in storage order."""
        return [
            (self.index_to_coord(index), value)
            for index, value in enumerate(self.values)
        ]