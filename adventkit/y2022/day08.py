"""Treetop tree house: count visible trees and find the best scenic score."""

from __future__ import annotations

import itertools
import math
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve
from adventkit.y2022.day08_grid import UGrid

YEAR = 2022
DAY = 8


class Direction(Enum):
    """Viewing directions, in the order they are looked at."""

    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"


@dataclass(frozen=True)
class Tree:
    position: tuple[int, int]
    height: int

    def iter_looking_up(self) -> Iterator[int]:
        return reversed(range(self.position[1]))

    def iter_looking_down(self) -> Iterator[int]:
        return itertools.count(self.position[1] + 1)

    def iter_looking_left(self) -> Iterator[int]:
        return reversed(range(self.position[0]))

    def iter_looking_right(self) -> Iterator[int]:
        return itertools.count(self.position[0] + 1)


@dataclass(frozen=True)
class VisibilityCheck:
    forest: UGrid

    def is_visible_from_outside(self, tree: Tree, direction: Direction) -> bool:
        """True if every tree between ``tree`` and the edge is shorter."""
        return not any(
            height >= tree.height for height in self._heights_from(tree, direction)
        )

    def count_visible_trees(self, tree: Tree, direction: Direction) -> int:
        """Trees seen from ``tree`` up to and including the first that blocks the view."""
        count = 0
        for height in self._heights_from(tree, direction):
            count += 1
            if height >= tree.height:
                break
        return count

    def _heights_from(self, tree: Tree, direction: Direction) -> Iterator[int]:
        start_x, start_y = tree.position
        if direction is Direction.UP:
            return (self.forest[(start_x, y)] for y in tree.iter_looking_up())
        if direction is Direction.DOWN:
            ys = itertools.takewhile(
                lambda y: y < self.forest.rows, tree.iter_looking_down()
            )
            return (self.forest[(start_x, y)] for y in ys)
        if direction is Direction.LEFT:
            return (self.forest[(x, start_y)] for x in tree.iter_looking_left())
        xs = itertools.takewhile(
            lambda x: x < self.forest.columns, tree.iter_looking_right()
        )
        return (self.forest[(x, start_y)] for x in xs)


def scenic_score(visibility_checker: VisibilityCheck, tree: Tree) -> int:
    """Product of the viewing distances in every direction."""
    return math.prod(
        visibility_checker.count_visible_trees(tree, direction) for direction in Direction
    )


def tree_at(forest: UGrid, index: int) -> Tree:
    position = forest.index_to_coord(index)
    return Tree(position=position, height=forest[position])


def _trees(forest: UGrid) -> Iterator[Tree]:
    return (tree_at(forest, index) for index in range(forest.rows * forest.columns))


def part_one(input_text: str) -> int | None:
    forest = UGrid.from_text(input_text)
    checker = VisibilityCheck(forest)

    def visible(tree: Tree) -> bool:
        x, y = tree.position
        if x == 0 or x == forest.rows - 1 or y == 0 or y == forest.columns - 1:
            return True
        return any(
            checker.is_visible_from_outside(tree, direction) for direction in Direction
        )

    return sum(visible(tree) for tree in _trees(forest))


def part_two(input_text: str) -> int | None:
    forest = UGrid.from_text(input_text)
    checker = VisibilityCheck(forest)
    return max((scenic_score(checker, tree) for tree in _trees(forest)), default=None)


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