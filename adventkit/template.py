"""Shared puzzle tooling: input loading, timing output and the aoc-cli wrapper."""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

LATEST_AOC_YEAR = 2023

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_log = logging.getLogger(__name__)


class AocCliError(Exception):
    """Base class for failures while driving aoc-cli."""

    message = "aoc-cli failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class CommandNotFoundError(AocCliError):
    message = "aoc-cli is not present in environment."


class CommandNotCallableError(AocCliError):
    message = "aoc-cli could not be called."


class BadExitStatusError(AocCliError):
    message = "aoc-cli exited with a non-zero status."

    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__()
        self.output = output


class AocIoError(AocCliError):
    message = "could not write output files to file system."


def _read_text(path: Path, error_msg: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as err:
        raise OSError(error_msg) from err


def read_input(base_dir: str | os.PathLike | None = None) -> str:
    """Read ``input.txt`` from ``base_dir`` (the current directory by default)."""
    path = Path(base_dir if base_dir is not None else Path.cwd()) / "input.txt"
    return _read_text(path, f"Could not open input file : {path}")


def read_example(base_dir: str | os.PathLike | None = None, suffix: str = "") -> str:
    """Read ``example.txt`` or ``example_<suffix>.txt`` from ``base_dir``."""
    name = f"example_{suffix}.txt" if suffix else "example.txt"
    path = Path(base_dir if base_dir is not None else Path.cwd()) / name
    return _read_text(path, f"Could not open input file : {path}")


def read_file(folder: str, day: int) -> str:
    """Read ``src/<folder>/<day>.txt`` relative to the working directory."""
    path = Path.cwd() / "src" / folder / f"{day:02}.txt"
    return _read_text(path, "could not open input file")


def _parse_time(value: str, postfix: str) -> float:
    return float(value.split(postfix)[0])


def parse_exec_time(output: str) -> float:
    """Sum the ``(elapsed: ...)`` timings found in solver output, in milliseconds."""
    total = 0.0
    for line in output.splitlines():
        if "elapsed:" not in line:
            continue
        timing = line.split("(elapsed: ")[-1]
        # `in` rather than endswith: the line may carry ANSI escape sequences.
        if "ns)" in timing:
            continue  # below rounding precision
        if "µs)" in timing:
            total += _parse_time(timing, "µs") / 1000
        elif "ms)" in timing:
            total += _parse_time(timing, "ms")
        elif "s)" in timing:
            total += _parse_time(timing, "s") * 1000
    return total


def _format_elapsed(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        return f"{nanos / 1_000_000_000:.2f}s"
    if nanos >= 1_000_000:
        return f"{nanos / 1_000_000:.2f}ms"
    if nanos >= 1_000:
        return f"{nanos / 1_000:.2f}µs"
    return f"{nanos:.2f}ns"


def solve(part: Any, solver: Callable[[str], Any], input_text: str) -> Any:
    """Run ``solver`` on ``input_text``, print its result with timing and return it."""
    print(f"🎄 {ANSI_BOLD}Part {part}{ANSI_RESET} 🎄")
    start = time.perf_counter_ns()
    result = solver(input_text)
    elapsed = time.perf_counter_ns() - start
    if result is None:
        print("not solved.")
    else:
        print(f"{result} {ANSI_ITALIC}(elapsed: {_format_elapsed(elapsed)}){ANSI_RESET}")
    return result


def check() -> None:
    """Ensure the ``aoc`` command can be started."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True, check=False)
    except OSError as err:
        raise CommandNotFoundError() from err


def read(day: int, year: int) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day`` of ``year``."""
    return call_aoc_cli(build_args("read", [], day, year))


def download(day: int, year: int) -> subprocess.CompletedProcess:
    """Download the input and puzzle text for ``day`` of ``year``."""
    input_path = get_input_path(year, day)
    puzzle_path = get_puzzle_path(year, day)
    try:
        os.makedirs("src/puzzles", exist_ok=True)
    except OSError as err:
        raise AocIoError() from err

    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
        year,
    )
    output = call_aoc_cli(args)
    if output.returncode != 0:
        raise BadExitStatusError(output)

    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return output


def get_input_path(year: int, day: int) -> str:
    return f"{year}/day_{day:02}/input.txt"


def get_puzzle_path(year: int, day: int) -> str:
    return f"{year}/day_{day:02}/README.md"


def build_args(command: str, args: Sequence[str], day: int, year: int) -> list[str]:
    """Build the aoc-cli argument list for ``command``."""
    return [*args, "--year", str(year), "--day", str(day), command]


def call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    """Run ``aoc`` with ``args``, its output going straight to the terminal."""
    _log.debug("Calling >aoc with: %s", " ".join(args))
    try:
        return subprocess.run(["aoc", *args], check=False)
    except OSError as err:
        raise CommandNotCallableError() from err