"""Hill climbing: shortest walk up a height map."""

from __future__ import annotations

import heapq
import itertools
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 12

_DIGIT_A = 10  # base-36 value of 'a'
_DIGIT_Z = 35  # base-36 value of 'z'


def char_to_elevation(elevation_char: str) -> int:
    """Height of a map square: ``a``/``S`` are 0, ``z``/``E`` are 25."""
    if elevation_char == "E":
        return _DIGIT_Z - _DIGIT_A
    if elevation_char == "S":
        return 0
    if len(elevation_char) != 1 or not (
        elevation_char.isascii() and elevation_char.isalpha()
    ):
        raise ValueError(f"invalid elevation : {elevation_char!r}")
    return int(elevation_char, 36) - _DIGIT_A


@dataclass(frozen=True, order=True)
class Pos:
    row: int
    col: int

    @classmethod
    def from_grid_position(cls, columns: int, index: int) -> Pos:
        return cls(index // columns, index % columns)

    def elevation(self, grid: Sequence[str]) -> int | None:
        """Elevation at this position, or None outside ``grid``."""
        if 0 <= self.row < len(grid) and 0 <= self.col < len(grid[self.row]):
            return char_to_elevation(grid[self.row][self.col])
        return None

    def distance(self, other: Pos) -> int:
        """Manhattan distance."""
        return abs(self.row - other.row) + abs(self.col - other.col)


class ElevationPathFinder:
    """Finds walks that climb at most one unit per step."""

    def __init__(self, height_map: Sequence[str]) -> None:
        self.elevation_grid = tuple(height_map)

    def _successors(self, position: Pos) -> list[Pos]:
        row, col = position.row, position.col
        candidates = (
            Pos(row, col + 1),
            Pos(row + 1, col),
            Pos(row, max(col - 1, 0)),
            Pos(max(row - 1, 0), col),
        )
        limit = (position.elevation(self.elevation_grid) or 0) + 1
        result = []
        for candidate in candidates:
            elevation = candidate.elevation(self.elevation_grid)
            if elevation is not None and 0 <= elevation <= limit:
                result.append(candidate)
        return result

    def shortest(self, start: Pos, end: Pos) -> list[Pos] | None:
        """Positions of a shortest walk from ``start`` to ``end``, both included."""
        parents: dict[Pos, tuple[Pos | None, int]] = {start: (None, 0)}
        order = itertools.count()
        to_see = [(start.distance(end), 0, next(order), start)]
        while to_see:
            _, neg_cost, _, node = heapq.heappop(to_see)
            cost = -neg_cost
            if node == end:
                path = [node]
                parent = parents[node][0]
                while parent is not None:
                    path.append(parent)
                    parent = parents[parent][0]
                return path[::-1]
            if cost > parents[node][1]:
                continue
            new_cost = cost + 1
            for successor in self._successors(node):
                known = parents.get(successor)
                if known is not None and known[1] <= new_cost:
                    continue
                parents[successor] = (node, new_cost)
                heapq.heappush(
                    to_see,
                    (new_cost + successor.distance(end), -new_cost, next(order), successor),
                )
        return None


@dataclass(frozen=True)
class PuzzleInput:
    height_map: tuple[str, ...]
    start: Pos
    end: Pos

    @classmethod
    def parse(cls, text: str) -> PuzzleInput:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("empty height map")
        columns = len(lines[0])
        cells = "".join(lines)
        if len(cells) % columns:
            raise ValueError("height map rows differ in length")
        rows = tuple(cells[i:i + columns] for i in range(0, len(cells), columns))

        def locate(marker: str, what: str) -> Pos:
            index = cells.find(marker)
            if index < 0:
                raise ValueError(f"Can't find {what} position")
            return Pos.from_grid_position(columns, index)

        return cls(rows, locate("S", "start"), locate("E", "end"))


def part_one(input_text: str) -> int | None:
    puzzle = PuzzleInput.parse(input_text)
    path = ElevationPathFinder(puzzle.height_map).shortest(puzzle.start, puzzle.end)
    return None if path is None else len(path) - 1


def part_two(input_text: str) -> int | None:
    puzzle = PuzzleInput.parse(input_text)
    finder = ElevationPathFinder(puzzle.height_map)
    starts = (
        Pos(row, col)
        for row, line in enumerate(puzzle.height_map)
        for col, char in enumerate(line)
        if char in "Sa"
    )
    paths = (finder.shortest(start, puzzle.end) for start in starts)
    lengths = [len(path) for path in paths if path is not None]
    return min(lengths) - 1 if lengths else None


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        text = Path(args[0]).read_text(encoding="utf-8")
    else:
        text = read_input(Path(get_input_path(YEAR, DAY)).parent)
    solve(1, part_one, text)
    solve(2, part_two, text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())