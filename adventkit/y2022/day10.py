"""Cathode-ray tube: run a tiny CPU and draw its picture on a CRT."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 10

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)
_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Instruction:
    """``addx <value>`` when ``addx`` is set, ``noop`` otherwise."""

    addx: int | None = None

    @classmethod
    def parse(cls, text: str) -> Instruction:
        """Any line with a space is an ``addx``; anything else is a ``noop``."""
        _, separator, number = text.strip().partition(" ")
        if not separator:
            return cls()
        if not _NUMBER.fullmatch(number):
            raise ValueError(f"invalid addx value : {number!r}")
        return cls(int(number))

    def to_x_cycles(self) -> list[int]:
        """Change of the X register at the end of each cycle the instruction takes."""
        if self.addx is None:
            return [0]
        return [0, self.addx]


def _screen() -> list[bool]:
    return [False] * (Crt.WIDE * Crt.HIGH)


@dataclass
class Crt:
    """A 40x6 screen drawn one pixel per cycle by a three-pixel-wide sprite."""

    WIDE = 40
    HIGH = 6

    cycle: int = 0
    x: int = 1
    screen: list[bool] = field(default_factory=_screen)

    def _sprite_covers(self, value: int) -> bool:
        index = self.cycle % self.WIDE
        return index - 1 <= value <= index + 1

    def render(self, delta_x: Iterable[int]) -> None:
        """Draw one pixel per delta, then apply the delta to the X register."""
        for delta in delta_x:
            if self.cycle >= len(self.screen):
                raise IndexError("the screen is already fully drawn")
            self.screen[self.cycle] = self._sprite_covers(self.x)
            self.cycle += 1
            self.x += delta

    def __str__(self) -> str:
        rows = (
            self.screen[start:start + self.WIDE]
            for start in range(0, len(self.screen), self.WIDE)
        )
        return "\n".join(
            "".join("#" if pixel else "." for pixel in row) for row in rows
        )


def _instructions(input_text: str) -> list[Instruction]:
    return [Instruction.parse(line) for line in input_text.splitlines()]


def part_one(input_text: str) -> int | None:
    x_cycles = [
        delta
        for instruction in _instructions(input_text)
        for delta in instruction.to_x_cycles()
    ]
    return sum(cycle * (sum(x_cycles[:cycle - 1]) + 1) for cycle in SIGNAL_CYCLES)


def part_two(input_text: str) -> str | None:
    crt = Crt()
    for instruction in _instructions(input_text):
        crt.render(instruction.to_x_cycles())
    return str(crt)


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