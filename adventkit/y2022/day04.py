"""Camp cleanup: count overlapping section assignments."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 4

_USIZE = re.compile(r"\+?[0-9]+")


def _parse_section_id(text: str) -> int:
    if not _USIZE.fullmatch(text):
        raise ValueError(f"invalid section id : {text!r}")
    return int(text)


def _parse_elf(text: str) -> tuple[int, int]:
    start, separator, end = text.partition("-")
    if not separator:
        raise ValueError(f"invalid section assignments : {text!r}")
    return _parse_section_id(start), _parse_section_id(end)


def _contains(section: tuple[int, int], value: int) -> bool:
    start, end = section
    return start <= value <= end


@dataclass(frozen=True)
class ElfPair:
    """Two inclusive section ranges assigned to a pair of elves."""

    first: tuple[int, int]
    second: tuple[int, int]

    @classmethod
    def parse(cls, text: str) -> ElfPair:
        first, separator, second = text.partition(",")
        if not separator:
            raise ValueError(f"invalid section assignments pair : {text!r}")
        return cls(_parse_elf(first), _parse_elf(second))

    def is_overlapping(self) -> bool:
        return self.first[0] <= self.second[1] and self.first[1] >= self.second[0]

    def is_fully_overlapping(self) -> bool:
        first_contains_second = all(_contains(self.first, v) for v in self.second)
        second_contains_first = all(_contains(self.second, v) for v in self.first)
        return first_contains_second or second_contains_first


def _pairs(input_text: str) -> list[ElfPair]:
    return [ElfPair.parse(line) for line in input_text.splitlines()]


def part_one(input_text: str) -> int | None:
    return sum(pair.is_fully_overlapping() for pair in _pairs(input_text))


def part_two(input_text: str) -> int | None:
    return sum(pair.is_overlapping() for pair in _pairs(input_text))


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