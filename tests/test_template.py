import subprocess
from unittest import mock

import pytest

from adventkit import template
from adventkit.template import (
    ANSI_RESET,
    AocCliError,
    BadExitStatusError,
    CommandNotCallableError,
    CommandNotFoundError,
    build_args,
    call_aoc_cli,
    check,
    download,
    get_input_path,
    get_puzzle_path,
    parse_exec_time,
    read,
    read_example,
    read_file,
    read_input,
    solve,
)


def test_parse_exec_time_nanoseconds_are_ignored():
    output = (
        f"🎄 Part 1 🎄\n0 (elapsed: 74.13ns){ANSI_RESET}\n"
        f"🎄 Part 2 🎄\n0 (elapsed: 50.00ns){ANSI_RESET}"
    )
    assert parse_exec_time(output) == pytest.approx(0.0, abs=1e-6)


def test_parse_exec_time_microseconds():
    output = "🎄 Part 1 🎄\n0 (elapsed: 755µs)\n🎄 Part 2 🎄\n0 (elapsed: 700µs)"
    assert parse_exec_time(output) == pytest.approx(1.455, abs=1e-6)


def test_parse_exec_time_mixed_micro_and_milli():
    output = "🎄 Part 1 🎄\n0 (elapsed: 70µs)\n🎄 Part 2 🎄\n0 (elapsed: 1.45ms)"
    assert parse_exec_time(output) == pytest.approx(1.52, abs=1e-6)


def test_parse_exec_time_seconds():
    output = "🎄 Part 1 🎄\n0 (elapsed: 10.3s)\n🎄 Part 2 🎄\n0 (elapsed: 100.50ms)"
    assert parse_exec_time(output) == pytest.approx(10400.50, abs=1e-6)


def test_solve_output_round_trips_through_parse_exec_time(capsys):
    result = solve(1, lambda text: len(text), "abc")
    out = capsys.readouterr().out
    assert result == 3
    assert "Part 1" in out
    assert "3 " in out and "elapsed:" in out
    assert parse_exec_time(out) >= 0.0


def test_solve_reports_unsolved(capsys):
    assert solve(2, lambda text: None, "abc") is None
    assert "not solved." in capsys.readouterr().out


def test_read_input_and_example(tmp_path):
    (tmp_path / "input.txt").write_text("puzzle input", encoding="utf-8")
    (tmp_path / "example.txt").write_text("base example", encoding="utf-8")
    (tmp_path / "example_one.txt").write_text("first example", encoding="utf-8")
    assert read_input(tmp_path) == "puzzle input"
    assert read_example(tmp_path) == "base example"
    assert read_example(tmp_path, "one") == "first example"


def test_read_input_missing_file(tmp_path):
    with pytest.raises(OSError, match="Could not open input file"):
        read_input(tmp_path)


def test_read_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "src" / "inputs"
    folder.mkdir(parents=True)
    (folder / "07.txt").write_text("day seven", encoding="utf-8")
    assert read_file("inputs", 7) == "day seven"
    with pytest.raises(OSError, match="could not open input file"):
        read_file("inputs", 8)


def test_paths_are_zero_padded():
    assert get_input_path(2022, 5).endswith("day_05/input.txt")
    assert get_puzzle_path(2022, 5).endswith("day_05/README.md")
    assert get_input_path(2022, 5).startswith("2022/")


def test_build_args_appends_year_day_and_command():
    assert build_args("read", [], 1, 2022) == ["--year", "2022", "--day", "1", "read"]
    assert build_args("download", ["--overwrite"], 3, 2023)[0] == "--overwrite"
    assert build_args("download", ["--overwrite"], 3, 2023)[-1] == "download"


def test_check_raises_when_command_missing():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(CommandNotFoundError) as info:
            check()
    assert str(info.value) == "aoc-cli is not present in environment."
    assert isinstance(info.value, AocCliError)


def test_call_aoc_cli_not_callable():
    with mock.patch("subprocess.run", side_effect=PermissionError):
        with pytest.raises(CommandNotCallableError) as info:
            call_aoc_cli(["--day", "1"])
    assert str(info.value) == "aoc-cli could not be called."


def test_read_calls_aoc_with_built_args():
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with mock.patch("subprocess.run", return_value=completed) as run:
        assert read(1, 2022) is completed
    assert run.call_args.args[0] == ["aoc", *build_args("read", [], 1, 2022)]


def test_download_success(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with mock.patch("subprocess.run", return_value=completed) as run:
        assert download(5, 2023) is completed
    called = run.call_args.args[0]
    assert called[0] == "aoc"
    assert get_input_path(2023, 5) in called
    assert get_puzzle_path(2023, 5) in called
    assert called[-1] == "download"
    assert (tmp_path / "src" / "puzzles").is_dir()
    assert "Successfully wrote input" in capsys.readouterr().out


def test_download_bad_exit_status(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    completed = subprocess.CompletedProcess(args=[], returncode=1)
    with mock.patch("subprocess.run", return_value=completed):
        with pytest.raises(BadExitStatusError) as info:
            download(5, 2023)
    assert info.value.output.returncode == 1
    assert str(info.value) == "aoc-cli exited with a non-zero status."


def test_io_error_message():
    assert str(template.AocIoError()) == "could not write output files to file system."