"""Tuning trouble: find start-of-packet and start-of-message markers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 6

PACKET_MARKER_LENGTH = 4
MESSAGE_MARKER_LENGTH = 14


def find_marker(datastream: str, length: int) -> int | None:
    """Characters read when the first ``length`` distinct characters end, if any."""
    for start in range(len(datastream) - length + 1):
        window = datastream[start:start + length]
        if len(set(window)) == len(window):
            return start + length
    return None


def part_one(input_text: str) -> int | None:
    return find_marker(input_text, PACKET_MARKER_LENGTH)


def part_two(input_text: str) -> int | None:
    return find_marker(input_text, MESSAGE_MARKER_LENGTH)


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