"""Command-line entry points: download, read, run-all and scaffold."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from adventkit.template import (
    ANSI_BOLD,
    ANSI_ITALIC,
    ANSI_RESET,
    LATEST_AOC_YEAR,
    AocCliError,
    check,
    download,
    parse_exec_time,
    read,
)

TEMPLATE_MANIFEST = "pyproject.toml"
_MISSING_CLI = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


@dataclass(frozen=True)
class DayArgs:
    day: int
    year: int | None = None


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise ValueError(message)


def _bounded_int(upper: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError as err:
            raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from err
        if not 0 <= value <= upper:
            raise argparse.ArgumentTypeError(f"{value} is out of range 0..={upper}")
        return value

    return convert


def _year_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-y", "--year", type=_bounded_int(65535), default=None)


def parse_day_args(argv: Sequence[str] | None = None) -> DayArgs:
    """Parse ``<day> [-y|--year YEAR]``; raises ValueError on bad arguments."""
    parser = _ArgumentParser(add_help=False)
    parser.add_argument("day", type=_bounded_int(255))
    _year_option(parser)
    namespace = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    return DayArgs(day=namespace.day, year=namespace.year)


def _run_cli_action(action, argv: Sequence[str] | None) -> int:
    try:
        args = parse_day_args(argv)
    except ValueError as err:
        print(f"Failed to process arguments: {err}", file=sys.stderr)
        return 1

    try:
        check()
    except AocCliError:
        print(_MISSING_CLI, file=sys.stderr)
        return 1

    year = args.year if args.year is not None else LATEST_AOC_YEAR
    try:
        output = action(args.day, year)
    except AocCliError as err:
        print(f"failed to spawn aoc-cli: {err}", file=sys.stderr)
        return 1
    return 0 if output.returncode == 0 else 1


def download_main(argv: Sequence[str] | None = None) -> int:
    """Download a day's input and puzzle text through aoc-cli."""
    return _run_cli_action(download, argv)


def read_main(argv: Sequence[str] | None = None) -> int:
    """Show a day's puzzle text through aoc-cli."""
    return _run_cli_action(read, argv)


def run_all_main(argv: Sequence[str] | None = None) -> int:
    """Run every day's solution of a year and print the total time."""
    parser = argparse.ArgumentParser(description="Run all solutions of a year.")
    _year_option(parser)
    namespace = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    year = namespace.year if namespace.year is not None else LATEST_AOC_YEAR

    total = 0.0
    for day in range(1, 26):
        label = f"{day:02}"
        completed = subprocess.run(
            [sys.executable, "-m", f"adventkit.y{year}.day{label}"],
            capture_output=True,
            encoding="utf-8",
            check=False,
        )
        output = completed.stdout or ""

        print("----------")
        print(f"{ANSI_BOLD}| Day {label} |{ANSI_RESET}")
        print("----------")
        print(output.strip() if output else "Not solved.")

        if output:
            total += parse_exec_time(output)

    print(f"{ANSI_BOLD}Total:{ANSI_RESET} {ANSI_ITALIC}{total:.2f}ms{ANSI_RESET}")
    return 0


def replace_module_name(path: str | Path, name: str) -> None:
    """Replace the ``%%NAME%%`` placeholder in the file at ``path``."""
    path = Path(path)
    contents = path.read_text(encoding="utf-8")
    try:
        path.write_text(contents.replace("%%NAME%%", name), encoding="utf-8")
    except OSError:
        print(f"Failed to edit : {path}", file=sys.stderr)
    else:
        print(f"Edited {path}")


def scaffold(
    day: int,
    year: int = LATEST_AOC_YEAR,
    templates_dir: str | Path = ".templates",
    root: str | Path = ".",
) -> Path:
    """Create ``<root>/<year>/day_<dd>`` from the template files and return it."""
    templates_dir = Path(templates_dir)
    module_name = f"day_{year}_{day:02}"
    module_path = Path(root) / str(year) / f"day_{day:02}"

    if module_path.exists():
        raise FileExistsError(f"destination `{module_path}` already exists")

    print(f"$ mkdir -p {module_path / 'src'}")
    (module_path / "src").mkdir(parents=True)

    sources = [*templates_dir.iterdir(), *(templates_dir / "src").iterdir()]
    for source in sources:
        if not source.is_file():
            continue
        destination = module_path / source.relative_to(templates_dir)
        print(f"$ cp {source} {destination}")
        shutil.copy(source, destination)

    replace_module_name(module_path / TEMPLATE_MANIFEST, module_name)

    print(f'Created workspace "{module_path}"')
    print("---")
    print(f"🎄 Workspace `{module_name}` is ready for your solution.")
    return module_path


def scaffold_main(argv: Sequence[str] | None = None) -> int:
    """Create a new day's workspace from ``.templates``."""
    try:
        args = parse_day_args(argv)
    except ValueError as err:
        print(f"Failed to process arguments:\n  {err}", file=sys.stderr)
        return 1

    year = args.year if args.year is not None else LATEST_AOC_YEAR
    try:
        scaffold(args.day, year)
    except FileExistsError as err:
        print(err, file=sys.stderr)
        return 1
    return 0