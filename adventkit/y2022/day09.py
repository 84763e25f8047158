"""Rope bridge: count the positions visited by the tail of a rope."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve
from adventkit.y2022.day09_rope import Motion, Rope, StepsParseError

YEAR = 2022
DAY = 9


def _motions(input_text: str) -> Iterator[Motion]:
    for line in input_text.splitlines():
        try:
            yield Motion.from_line(line)
        except StepsParseError:
            continue  # lines with an unreadable step count are skipped


def count_tail_positions(input_text: str, knots: int) -> int:
    """Distinct positions the tail of a ``knots``-knot rope visits."""
    rope = Rope(knots)
    visited = set()
    for motion in list(_motions(input_text)):
        for vector in motion.as_vectors():
            rope.move_head_by(vector)
            visited.add(rope.tail())
    return len(visited)


def part_one(input_text: str) -> int | None:
    return count_tail_positions(input_text, 2)


def part_two(input_text: str) -> int | None:
    return count_tail_positions(input_text, 10)


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