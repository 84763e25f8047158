"""Monkey notes: the model of each monkey and the parser for the notes."""

from __future__ import annotations

import re
import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

_U64_MAX = 2**64 - 1
_USIZE_MAX = 2**64 - 1

_SPACE0 = re.compile(r"[ \t]*")
_SPACE1 = re.compile(r"[ \t]+")
_MULTISPACE1 = re.compile(r"[ \t\r\n]+")
_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

T = TypeVar("T")
_Parser = Callable[[str, int], "tuple[Any, int]"]


class NotesParseError(ValueError):
    """Raised when the monkey notes cannot be read."""


@dataclass(frozen=True)
class Worry:
    """An operand: the old worry level when ``level`` is None, else a constant."""

    level: int | None = None

    def resolve(self, old_value: int) -> int:
        return old_value if self.level is None else self.level


class Operator(Enum):
    ADD = "+"
    MULTIPLY = "*"


@dataclass(frozen=True)
class Operation:
    operator: Operator
    left: Worry
    right: Worry

    def calc(self, old_value: int) -> int:
        """The new worry level computed from ``old_value``."""
        left = self.left.resolve(old_value)
        right = self.right.resolve(old_value)
        if self.operator is Operator.ADD:
            return left + right
        return left * right


@dataclass(frozen=True)
class DivisibilityTest:
    """Throw to ``if_true`` when the worry level divides by ``divisor``, else ``if_false``."""

    divisor: int
    if_true: int
    if_false: int

    def throw_index(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


@dataclass(frozen=True)
class Monkey:
    id: int
    items: tuple[int, ...]
    operation: Operation
    test: DivisibilityTest


def _fail(what: str, pos: int) -> NotesParseError:
    return NotesParseError(f"expected {what} at offset {pos}")


def _match(regex: re.Pattern[str], text: str, pos: int, what: str) -> re.Match[str]:
    found = regex.match(text, pos)
    if found is None:
        raise _fail(what, pos)
    return found


def _tag(text: str, pos: int, literal: str) -> int:
    if not text.startswith(literal, pos):
        raise _fail(repr(literal), pos)
    return pos + len(literal)


def _bounded(digits: str, upper: int, pos: int) -> int:
    value = int(digits)
    if value > upper:
        raise NotesParseError(f"number {digits} at offset {pos} is too large")
    return value


def _float_to_usize(text: str) -> int:
    try:
        value = struct.unpack("f", struct.pack("f", float(text)))[0]
    except OverflowError:
        return 0 if text.startswith("-") else _USIZE_MAX
    return max(0, min(_USIZE_MAX, int(value)))


def _permutation(
    text: str, pos: int, parsers: Sequence[_Parser], what: str
) -> tuple[list[Any], int]:
    """Apply every parser once, in whichever order they succeed."""
    results: dict[int, Any] = {}
    while len(results) < len(parsers):
        for index, parser in enumerate(parsers):
            if index in results:
                continue
            try:
                value, new_pos = parser(text, pos)
            except NotesParseError:
                continue
            results[index] = value
            pos = new_pos
            break
        else:
            raise _fail(what, pos)
    return [value for _, value in sorted(results.items())], pos


def _after_space(parser: _Parser) -> _Parser:
    def parse(text: str, pos: int) -> tuple[Any, int]:
        pos = _match(_MULTISPACE1, text, pos, "whitespace").end()
        return parser(text, pos)

    return parse


def _monkey_id_at(text: str, pos: int) -> tuple[int, int]:
    pos = _tag(text, pos, "Monkey")
    pos = _match(_SPACE1, text, pos, "space").end()
    number = _match(_FLOAT, text, pos, "monkey id")
    pos = _tag(text, number.end(), ":")
    return _float_to_usize(number[0]), pos


def _starting_items_at(text: str, pos: int) -> tuple[tuple[int, ...], int]:
    pos = _tag(text, pos, "Starting items:")
    pos = _SPACE0.match(text, pos).end()  # type: ignore[union-attr]
    items: list[int] = []
    found = _DIGITS.match(text, pos)
    if found:
        items.append(_bounded(found[0], _U64_MAX, pos))
        pos = found.end()
        while text.startswith(", ", pos) and (found := _DIGITS.match(text, pos + 2)):
            items.append(_bounded(found[0], _U64_MAX, pos + 2))
            pos = found.end()
    return tuple(items), pos


def _worry_level_at(text: str, pos: int) -> tuple[Worry, int]:
    if text.startswith("old", pos):
        return Worry(), pos + 3
    found = _match(_DIGITS, text, pos, "worry level")
    return Worry(_bounded(found[0], _U64_MAX, pos)), found.end()


def _operation_at(text: str, pos: int) -> tuple[Operation, int]:
    pos = _tag(text, pos, "Operation: new = ")
    left, pos = _worry_level_at(text, pos)
    pos = _match(_SPACE1, text, pos, "space").end()
    if text[pos:pos + 1] not in ("+", "*"):
        raise _fail("'+' or '*'", pos)
    operator = Operator(text[pos])
    pos = _match(_SPACE1, text, pos + 1, "space").end()
    right, pos = _worry_level_at(text, pos)
    return Operation(operator, left, right), pos


def _number_after(literal: str, upper: int) -> _Parser:
    def parse(text: str, pos: int) -> tuple[int, int]:
        pos = _tag(text, pos, literal)
        found = _match(_DIGITS, text, pos, "number")
        return _bounded(found[0], upper, pos), found.end()

    return parse


_TEST_PARSERS: tuple[_Parser, ...] = (
    _number_after("Test: divisible by ", _U64_MAX),
    _after_space(_number_after("If true: throw to monkey ", _USIZE_MAX)),
    _after_space(_number_after("If false: throw to monkey ", _USIZE_MAX)),
)


def _test_at(text: str, pos: int) -> tuple[DivisibilityTest, int]:
    (divisor, if_true, if_false), pos = _permutation(text, pos, _TEST_PARSERS, "test")
    return DivisibilityTest(divisor, if_true, if_false), pos


def _monkey_id_line_at(text: str, pos: int) -> tuple[int, int]:
    monkey_id, pos = _monkey_id_at(text, pos)
    return monkey_id, _tag(text, pos, "\n")


_MONKEY_PARSERS: tuple[_Parser, ...] = (
    _monkey_id_line_at,
    _after_space(_starting_items_at),
    _after_space(_operation_at),
    _after_space(_test_at),
)


def _monkey_at(text: str, pos: int) -> tuple[Monkey, int]:
    (monkey_id, items, operation, test), pos = _permutation(
        text, pos, _MONKEY_PARSERS, "monkey"
    )
    return Monkey(id=monkey_id, items=items, operation=operation, test=test), pos


def _whole(parser: Callable[[str, int], tuple[T, int]], text: str) -> T:
    value, pos = parser(text, 0)
    if pos != len(text):
        raise NotesParseError(f"unexpected text at offset {pos}: {text[pos:]!r}")
    return value


def parse_notes(text: str) -> list[Monkey]:
    """Parse monkeys separated by blank lines; text after the last one is ignored."""
    monkey, pos = _monkey_at(text, 0)
    monkeys = [monkey]
    while text.startswith("\n\n", pos):
        try:
            monkey, pos = _monkey_at(text, pos + 2)
        except NotesParseError:
            break
        monkeys.append(monkey)
    return monkeys


def parse_monkey(text: str) -> Monkey:
    return _whole(_monkey_at, text)


def parse_monkey_id(text: str) -> int:
    return _whole(_monkey_id_at, text)


def parse_starting_items(text: str) -> tuple[int, ...]:
    return _whole(_starting_items_at, text)


def parse_operation(text: str) -> Operation:
    return _whole(_operation_at, text)


def parse_worry_level(text: str) -> Worry:
    return _whole(_worry_level_at, text)


def parse_test(text: str) -> DivisibilityTest:
    return _whole(_test_at, text)