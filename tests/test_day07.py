import pytest

from adventkit.y2022.day07 import (
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListDirectory,
    TerminalParseError,
    directories_sizes,
    parse_terminal_output,
    part_one,
    part_two,
)

EXAMPLE = "\n".join(
    [
        "$ cd /",
        "$ ls",
        "dir a",
        "14848514 b.txt",
        "8504156 c.dat",
        "dir d",
        "$ cd a",
        "$ ls",
        "dir e",
        "29116 f",
        "2557 g",
        "62596 h.lst",
        "$ cd e",
        "$ ls",
        "584 i",
        "$ cd ..",
        "$ cd ..",
        "$ cd d",
        "$ ls",
        "4060174 j",
        "8033020 d.log",
        "5626152 d.ext",
        "7214296 k",
    ]
) + "\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 95437


def test_part_two_example():
    assert part_two(EXAMPLE) == 24_933_642


def test_parse_first_commands():
    commands = parse_terminal_output(EXAMPLE)
    assert commands[0] == ChangeDirectory("/")
    assert commands[1] == ListDirectory(
        (
            DirectoryEntry("a"),
            FileEntry("b.txt", 14848514),
            FileEntry("c.dat", 8504156),
            DirectoryEntry("d"),
        )
    )
    assert ChangeDirectory("..") in commands


def test_parse_stops_at_unknown_text():
    assert parse_terminal_output("$ cd /\nnonsense") == [ChangeDirectory("/")]


def test_parse_requires_a_command():
    with pytest.raises(TerminalParseError):
        parse_terminal_output("nonsense")


def test_directory_sizes_of_example():
    sizes = directories_sizes(parse_terminal_output(EXAMPLE))
    assert sorted(sizes) == ["/", "/a", "/a/e", "/d"]
    assert sizes["/a/e"] == 584
    assert sizes["/d"] == 4060174 + 8033020 + 5626152 + 7214296


def test_root_holds_everything():
    sizes = directories_sizes(parse_terminal_output(EXAMPLE))
    assert sizes["/"] == sizes["/a"] + sizes["/d"] + 14848514 + 8504156
    assert all(size <= sizes["/"] for size in sizes.values())


def test_cd_out_of_root_stays_at_root():
    commands = [
        ChangeDirectory(".."),
        ListDirectory((FileEntry("x", 5),)),
    ]
    assert directories_sizes(commands) == {"/": 5}


def test_part_two_requires_root_listing():
    with pytest.raises(ValueError):
        part_two("$ cd a\n$ ls\n5 x\n")