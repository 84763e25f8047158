"""Rucksack reorganization: sum the priorities of misplaced items."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 3

_DIGIT_9 = 9  # base-36 value of '9'
_DIGIT_Z = 35  # base-36 value of 'z'
_UPPERCASE_OFFSET = _DIGIT_Z - _DIGIT_9


def char_to_priority(char: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if len(char) != 1 or not (char.isascii() and char.isalnum()):
        raise ValueError(f"invalid item : {char!r}")
    digit = int(char, 36)
    if digit < _DIGIT_9:
        raise ValueError(f"invalid item : {char!r}")
    start_priority = 0 if char.islower() else _UPPERCASE_OFFSET
    return digit - _DIGIT_9 + start_priority


def part_one(input_text: str) -> int | None:
    total = 0
    for rucksack in input_text.splitlines():
        middle = len(rucksack) // 2
        common = set(rucksack[:middle]) & set(rucksack[middle:])
        total += sum(char_to_priority(item) for item in common)
    return total


def part_two(input_text: str) -> int | None:
    lines = input_text.splitlines()
    groups = zip(*[iter(lines)] * 3)
    total = 0
    for first, second, third in groups:
        badge = next((c for c in first if c in second and c in third), None)
        if badge is not None:
            total += char_to_priority(badge)
    return total


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