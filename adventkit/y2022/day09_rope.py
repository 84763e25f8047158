"""Rope bridge model: knot positions, head motions and a rope that follows its head."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import repeat

_USIZE_MAX = 2**64 - 1
_USIZE = re.compile(r"\+?[0-9]+")


class StepsParseError(ValueError):
    """Raised when the step count of a motion is not a valid number."""


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def normalize(self) -> Position:
        """Each coordinate clamped to the range -1..=1."""
        return Position(max(-1, min(1, self.x)), max(-1, min(1, self.y)))

    def distance(self, target: Position) -> int:
        """Chebyshev distance: diagonal neighbours are at distance 1."""
        return max(abs(self.x - target.x), abs(self.y - target.y))

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)


class MotionDirection(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


_VECTORS = {
    MotionDirection.UP: Position(0, 1),
    MotionDirection.DOWN: Position(0, -1),
    MotionDirection.RIGHT: Position(1, 0),
    MotionDirection.LEFT: Position(-1, 0),
}


@dataclass(frozen=True)
class Motion:
    """Move the head ``steps`` times one step towards ``direction``."""

    direction: MotionDirection
    steps: int

    @classmethod
    def from_line(cls, line: str) -> Motion:
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"invalid motion : {line!r}")
        direction, steps_text = parts
        if not _USIZE.fullmatch(steps_text) or int(steps_text) > _USIZE_MAX:
            raise StepsParseError(f"invalid step count : {steps_text!r}")
        steps = int(steps_text)
        try:
            return cls(MotionDirection(direction), steps)
        except ValueError:
            raise ValueError(f"invalid direction : {direction!r}") from None

    def as_vectors(self) -> Iterator[Position]:
        """One unit vector per step."""
        return repeat(_VECTORS[self.direction], self.steps)


class Rope:
    """A rope of knots; every knot follows the one before it."""

    def __init__(self, length: int = 2) -> None:
        if length < 1:
            raise ValueError("a rope needs at least one knot")
        self.knots = [Position() for _ in range(length)]

    def tail(self) -> Position:
        return self.knots[-1]

    def move_head_by(self, vector: Position) -> None:
        self.knots[0] = self.knots[0] + vector
        for index in range(1, len(self.knots)):
            head = self.knots[index - 1]
            tail = self.knots[index]
            if tail.distance(head) > 1:
                self.knots[index] = tail + (head - tail).normalize()