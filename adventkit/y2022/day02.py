"""Rock paper scissors tournament scoring."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 2


class HandShape(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def parse(cls, letter: str) -> HandShape:
        shapes = {
            "A": cls.ROCK, "X": cls.ROCK,
            "B": cls.PAPER, "Y": cls.PAPER,
            "C": cls.SCISSORS, "Z": cls.SCISSORS,
        }
        try:
            return shapes[letter]
        except KeyError:
            raise ValueError(f"invalid hand shape : {letter}") from None

    def beats(self) -> HandShape:
        """The shape this one defeats."""
        return _BEATS[self]


_BEATS = {
    HandShape.ROCK: HandShape.SCISSORS,
    HandShape.PAPER: HandShape.ROCK,
    HandShape.SCISSORS: HandShape.PAPER,
}


class Strategy(Enum):
    """Outcome of the round, seen from the opponent."""

    LOST = "Z"
    DRAW = "Y"
    WON = "X"

    @classmethod
    def parse(cls, letter: str) -> Strategy:
        try:
            return cls(letter)
        except ValueError:
            raise ValueError(f"invalid strategy : {letter}") from None

    def hand_against(self, opponent: HandShape) -> HandShape:
        """The shape to play against ``opponent`` to reach this outcome."""
        if self is Strategy.DRAW:
            return opponent
        if self is Strategy.LOST:
            return opponent.beats().beats()
        return opponent.beats()


@dataclass(frozen=True)
class Round:
    opponent: HandShape
    player: HandShape

    def player_score(self) -> int:
        return self.player.value + self._battle_score()

    def _battle_score(self) -> int:
        if self.opponent.beats() is self.player:
            return 0
        if self.player.beats() is self.opponent:
            return 6
        return 3


def _rounds(
    input_text: str, choose: Callable[[HandShape, str], HandShape], what: str
) -> Iterator[Round]:
    for line in input_text.splitlines():
        opponent_letter, separator, letter = line.partition(" ")
        if not separator:
            raise ValueError(f"Could not split opponent and {what} letters")
        opponent = HandShape.parse(opponent_letter)
        yield Round(opponent=opponent, player=choose(opponent, letter))


def part_one(input_text: str) -> int | None:
    rounds = _rounds(input_text, lambda _opponent, letter: HandShape.parse(letter), "player")
    return sum(r.player_score() for r in rounds)


def part_two(input_text: str) -> int | None:
    rounds = _rounds(
        input_text,
        lambda opponent, letter: Strategy.parse(letter).hand_against(opponent),
        "strategy",
    )
    return sum(r.player_score() for r in rounds)


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