"""Template day: read a number forwards and backwards."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 0

_U32_MAX = 2**32 - 1
_U32 = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int | None:
    if not _U32.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def part_one(input_text: str) -> int | None:
    return _parse_u32(input_text)


def part_two(input_text: str) -> int | None:
    return _parse_u32(input_text[::-1])


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