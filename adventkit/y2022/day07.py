"""No space left on device: size directories from a terminal session."""

from __future__ import annotations

import re
import struct
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from adventkit.template import get_input_path, read_input, solve

YEAR = 2022
DAY = 7

ROOT = "/"
PARENT = ".."
SMALL_DIRECTORY_LIMIT = 100_000
TOTAL_SPACE = 70_000_000
UPDATE_SPACE = 30_000_000

_USIZE_MAX = 2**64 - 1
_CD = re.compile(r"\$ cd (?:(?P<root>/)|(?P<out>\.\.)|(?P<name>[A-Za-z0-9]+))")
_LS = "$ ls\n"
_FILENAME = r"[A-Za-z0-9._-]+"
_DIR = re.compile(rf"dir[ \t]+(?P<name>{_FILENAME})")
_FILE = re.compile(
    r"(?P<size>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    rf"[ \t]+(?P<name>{_FILENAME})"
)


class TerminalParseError(ValueError):
    """Raised when the terminal output does not start with a command."""


@dataclass(frozen=True)
class ChangeDirectory:
    """``$ cd``: ``target`` is ``/``, ``..`` or a directory name."""

    target: str


@dataclass(frozen=True)
class DirectoryEntry:
    name: str


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int


@dataclass(frozen=True)
class ListDirectory:
    """``$ ls`` with the entries it printed."""

    contents: tuple[DirectoryEntry | FileEntry, ...] = ()


Command = ChangeDirectory | ListDirectory


def _file_size(text: str) -> int:
    try:
        value = struct.unpack("f", struct.pack("f", float(text)))[0]
    except OverflowError:
        return _USIZE_MAX if not text.startswith("-") else 0
    return max(0, int(value))


def _entry_at(text: str, pos: int) -> tuple[DirectoryEntry | FileEntry, int] | None:
    match = _DIR.match(text, pos)
    if match:
        return DirectoryEntry(match["name"]), match.end()
    match = _FILE.match(text, pos)
    if match:
        return FileEntry(match["name"], _file_size(match["size"])), match.end()
    return None


def _command_at(text: str, pos: int) -> tuple[Command, int] | None:
    match = _CD.match(text, pos)
    if match:
        target = match["root"] or match["out"] or match["name"]
        return ChangeDirectory(target), match.end()
    if not text.startswith(_LS, pos):
        return None
    pos += len(_LS)
    contents = []
    entry = _entry_at(text, pos)
    while entry is not None:
        contents.append(entry[0])
        pos = entry[1]
        if not text.startswith("\n", pos):
            break
        entry = _entry_at(text, pos + 1)
        if entry is None:
            break
    return ListDirectory(tuple(contents)), pos


def parse_terminal_output(text: str) -> list[Command]:
    """Parse commands separated by newlines; parsing stops at the first unknown text."""
    commands: list[Command] = []
    pos = 0
    while True:
        parsed = _command_at(text, pos)
        if parsed is None:
            break
        command, pos = parsed
        commands.append(command)
        if not text.startswith("\n", pos):
            break
        pos += 1
    if not commands:
        line = text.splitlines()[0] if text else ""
        raise TerminalParseError(f"expected a command at line 1: {line!r}")
    return commands


def directories_sizes(commands: Iterable[Command]) -> dict[str, int]:
    """Total size of the files below every directory that was listed."""
    path = PurePosixPath(ROOT)
    sizes: dict[str, int] = {}
    for command in commands:
        if isinstance(command, ChangeDirectory):
            if command.target == ROOT:
                path = PurePosixPath(ROOT)
            elif command.target == PARENT:
                path = path.parent
            else:
                path = path / command.target
            continue
        files_size = sum(e.size for e in command.contents if isinstance(e, FileEntry))
        for directory in (path, *path.parents):
            key = str(directory)
            sizes[key] = sizes.get(key, 0) + files_size
    return dict(sorted(sizes.items()))


def part_one(input_text: str) -> int | None:
    sizes = directories_sizes(parse_terminal_output(input_text))
    return sum(size for size in sizes.values() if size < SMALL_DIRECTORY_LIMIT)


def part_two(input_text: str) -> int | None:
    sizes = directories_sizes(parse_terminal_output(input_text))
    try:
        used_space = sizes[ROOT]
    except KeyError:
        raise ValueError("the root directory was never listed") from None
    if used_space > TOTAL_SPACE:
        raise ValueError("more space used than the disk holds")
    free_space = TOTAL_SPACE - used_space
    if free_space > UPDATE_SPACE:
        raise ValueError("enough free space already")
    min_space_to_delete = UPDATE_SPACE - free_space
    return min(
        (size for size in sizes.values() if size >= min_space_to_delete), default=None
    )


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