"""Supply stacks: rearrange crates and read the top of each stack."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 5

_U8_MAX = 255
_NUMBER_LINE = re.compile(r"[ \t]*[0-9]+(?:[ \t]+[0-9]+)*[ \t]*\n\n")
_PROCEDURE = re.compile(
    r"move[ \t]+([0-9]+)[ \t]+from[ \t]+([0-9]+)[ \t]+to[ \t]+([0-9]+)"
)


class CrateParseError(ValueError):
    """Raised when the drawing of the stacks or the procedure cannot be read."""


@dataclass(frozen=True)
class Procedure:
    """Move ``moves`` crates from stack ``source`` to stack ``target`` (0-based)."""

    moves: int
    source: int
    target: int


def _crate_at(line: str, pos: int) -> tuple[str, int] | None:
    if line.startswith("[", pos) and len(line) > pos + 1 and line.startswith("]", pos + 2):
        return line[pos + 1], pos + 3
    if line.startswith("   ", pos):
        return " ", pos + 3
    return None


def parse_crate_line(line: str) -> tuple[list[str], str]:
    """Parse one row of crates; empty slots read as a space. Returns (row, rest)."""
    first = _crate_at(line, 0)
    if first is None:
        raise CrateParseError(f"invalid crate line : {line!r}")
    name, pos = first
    row = [name]
    while line.startswith(" ", pos):
        following = _crate_at(line, pos + 1)
        if following is None:
            break
        name, pos = following
        row.append(name)
    return row, line[pos:]


def parse_stacks(text: str) -> tuple[list[list[str]], str]:
    """Parse the crate drawing into stacks, top crate first. Returns (stacks, rest)."""
    stacks: list[list[str]] = []
    rest = text
    rows = 0
    while True:
        try:
            row, after = parse_crate_line(rest)
        except CrateParseError:
            break
        if not after.startswith("\n"):
            break
        rest = after[1:]
        rows += 1
        for index, name in enumerate(row):
            while len(stacks) <= index:
                stacks.append([])
            if name.isalnum():
                stacks[index].append(name)
    if not rows:
        raise CrateParseError("invalid crate stack")
    return stacks, rest


def _procedure_at(text: str, pos: int) -> tuple[tuple[int, int, int], int] | None:
    match = _PROCEDURE.match(text, pos)
    if match is None:
        return None
    values = tuple(int(group) for group in match.groups())
    if any(value > _U8_MAX for value in values):
        return None
    return values, match.end()  # type: ignore[return-value]


def parse_procedures(text: str) -> list[Procedure]:
    """Parse the rearrangement procedure; anything after the last step is ignored."""
    first = _procedure_at(text, 0)
    if first is None:
        raise CrateParseError("invalid procedure")
    steps = [first[0]]
    pos = first[1]
    while text.startswith("\n", pos):
        following = _procedure_at(text, pos + 1)
        if following is None:
            break
        steps.append(following[0])
        pos = following[1]

    procedures = []
    for moves, source, target in steps:
        if source == 0 or target == 0:
            raise CrateParseError("stack numbers start at 1")
        procedures.append(Procedure(moves=moves, source=source - 1, target=target - 1))
    return procedures


def parse_input(text: str) -> tuple[list[list[str]], list[Procedure]]:
    """Parse the whole puzzle input into stacks and procedures."""
    stacks, rest = parse_stacks(text)
    numbers = _NUMBER_LINE.match(rest)
    if numbers is None or any(
        int(n) > _U8_MAX for n in re.findall(r"[0-9]+", numbers.group(0))
    ):
        raise CrateParseError("invalid number line")
    return stacks, parse_procedures(rest[numbers.end():])


def _rearrange(input_text: str, keep_order: bool) -> str:
    stacks, procedures = parse_input(input_text)
    for step in procedures:
        try:
            source = stacks[step.source]
            target = stacks[step.target]
        except IndexError:
            raise ValueError(f"no such stack in {step}") from None
        if step.moves > len(source):
            raise ValueError(f"not enough crates for {step}")
        moved = source[: step.moves]
        del source[: step.moves]
        target[:0] = moved if keep_order else moved[::-1]
    if any(not stack for stack in stacks):
        raise ValueError("a stack ended up empty")
    return "".join(stack[0] for stack in stacks)


def part_one(input_text: str) -> str | None:
    return _rearrange(input_text, keep_order=False)


def part_two(input_text: str) -> str | None:
    return _rearrange(input_text, keep_order=True)


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