"""Calorie counting: find the elves carrying the most calories."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 1

_U32_MAX = 2**32 - 1
_U32 = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int | None:
    if not _U32.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _inventory_calories(inventory: str) -> list[int]:
    parsed = (_parse_u32(line) for line in inventory.splitlines())
    return [value for value in parsed if value is not None]


def part_one(input_text: str) -> int | None:
    return max(sum(_inventory_calories(inv)) for inv in input_text.split("\n\n"))


def part_two(input_text: str) -> int | None:
    totals = [
        sum(calories) if calories else None
        for calories in map(_inventory_calories, input_text.split("\n\n"))
    ]
    # Inventories without any calories rank below every other and spoil the sum.
    totals.sort(key=lambda total: (total is not None, total or 0), reverse=True)
    top = totals[:3]
    if any(total is None for total in top):
        return None
    return sum(top)


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