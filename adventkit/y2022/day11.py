"""Monkey in the middle: simulate monkeys throwing items around."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve
from adventkit.y2022.day11_notes import Monkey, parse_notes

YEAR = 2022
DAY = 11


class Round:
    """Plays rounds of keep-away and counts how often each monkey inspects an item."""

    def __init__(self, monkeys: Iterable[Monkey], human_worry: Callable[[int], int]) -> None:
        monkeys = list(monkeys)
        self.human_worry = human_worry
        self.monkey_by_id = {monkey.id: monkey for monkey in monkeys}
        self.items = {monkey.id: list(monkey.items) for monkey in monkeys}
        self.inspection_counts = {monkey.id: 0 for monkey in monkeys}

    def play(self) -> None:
        """Let every monkey, in id order, inspect and throw all of its items."""
        for monkey_id in range(len(self.monkey_by_id)):
            try:
                monkey = self.monkey_by_id[monkey_id]
            except KeyError:
                raise ValueError(f"Monkey {monkey_id} not found") from None

            held = self.items[monkey_id]
            throws = []
            for item in held:
                worry = self.human_worry(monkey.operation.calc(item))
                throws.append((monkey.test.throw_index(worry), worry))
            held.clear()

            self.inspection_counts[monkey_id] += len(throws)
            for target, worry in throws:
                if target in self.items:
                    self.items[target].append(worry)

    def monkey_business(self) -> int:
        """Product of the two highest inspection counts."""
        return math.prod(sorted(self.inspection_counts.values(), reverse=True)[:2])


def part_one(input_text: str) -> int | None:
    round_ = Round(parse_notes(input_text), lambda worry: worry // 3)
    for _ in range(20):
        round_.play()
    return round_.monkey_business()


def part_two(input_text: str) -> int | None:
    monkeys = parse_notes(input_text)
    divisor = math.prod(monkey.test.divisor for monkey in monkeys)
    round_ = Round(monkeys, lambda worry: worry % divisor)
    for _ in range(10_000):
        round_.play()
    return round_.monkey_business()


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